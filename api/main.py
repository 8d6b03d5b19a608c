from typing import Any

from fastapi import FastAPI, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from api.core.config import Settings, settings
from api.routes.health import router as health_router
from api.routes.ocr import error_response, router as ocr_router
from vocab_ocr.logging_config import logger

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


def create_app(app_settings: Settings | None = None, vision_client: Any = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(
        title=app_settings.api_name,
        version=app_settings.api_version,
        description=(
            "Vocabulary OCR API. "
            "Sends a base64 image of a word table to a multimodal model and returns the extracted words."
        ),
    )
    app.state.settings = app_settings
    app.state.vision_client = vision_client

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):  # type: ignore[no-untyped-def]
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": "hello world", "service": app_settings.api_name}

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[no-untyped-def]
        # Routing raises 405 for every method a path does not register.
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            return await http_exception_handler(request, exc)
        response = error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):  # type: ignore[no-untyped-def]
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "type": exc.__class__.__name__},
        )

    app.include_router(health_router)
    app.include_router(ocr_router)
    return app


app = create_app()
