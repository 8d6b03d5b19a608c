from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from api.core.config import Settings
from api.main import create_app
from fakes import FakeVisionClient


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        api_name="Vocabulary OCR API (test)",
        api_version="0.0.0-test",
        anthropic_api_key="test-key",
        ocr_model="claude-test-model",
        ocr_max_tokens=1234,
    )


@pytest.fixture
def image_body() -> dict[str, Any]:
    return {"image": {"media_type": "image/png", "data": "iVBORw0KGgoAAAANSUhEUg=="}}


@pytest.fixture
def make_client(test_settings: Settings):
    """Build a TestClient around an app whose model client returns `reply_text` or raises `error`."""

    def _make(reply_text: str | None = None, error: Exception | None = None) -> tuple[TestClient, FakeVisionClient]:
        vision_client = FakeVisionClient(reply_text=reply_text, error=error)
        app = create_app(test_settings, vision_client=vision_client)
        return TestClient(app), vision_client

    return _make
