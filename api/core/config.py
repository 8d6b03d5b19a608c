import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    api_name: str = os.getenv("API_NAME", "Vocabulary OCR API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    anthropic_api_key: str = os.getenv("ANTHROPIC_API_KEY", "").strip()
    ocr_model: str = os.getenv("OCR_MODEL", "claude-sonnet-4-5-20250929").strip()
    ocr_max_tokens: int = int(os.getenv("OCR_MAX_TOKENS", "4096"))


settings = Settings()
