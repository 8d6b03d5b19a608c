from typing import Any

from starlette.requests import Request

from api.core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_vision_client(request: Request) -> Any:
    """
    Model client injected at app creation, if any.

    `None` lets the extractor build a fresh Anthropic client per request.
    """
    return request.app.state.vision_client
