from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

TrimmedText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ImagePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    media_type: str = Field(default="", description="Declared MIME type, e.g. image/png.")
    data: str = Field(default="", description="Base64 image payload without data: prefix.")


class OcrRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    image: ImagePayload | None = None


class WordEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Set identifier, the prompt asks for "1" on every row.
    number: str = ""
    word: TrimmedText
    meaning: TrimmedText

    @field_validator("number", mode="before")
    @classmethod
    def _number_to_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value
        # bool is an int subclass; only real numbers are rendered.
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
            return str(value)
        return ""


class WordsResponse(BaseModel):
    words: list[WordEntry] = []


class ErrorResponse(BaseModel):
    error: str
