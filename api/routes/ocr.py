import uuid
from time import perf_counter
from typing import Any

from fastapi import APIRouter, Depends, Header, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.requests import Request

from api.core.config import Settings
from api.deps.state import get_settings, get_vision_client
from api.models.ocr import ErrorResponse, OcrRequest, WordsResponse
from api.services.word_extractor import extract_words_from_image
from vocab_ocr.logging_config import logger

router = APIRouter(tags=["ocr"])

OCR_PATH = "/api/ocr"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def _read_ocr_request(request: Request) -> OcrRequest | None:
    try:
        body = await request.json()
    except ValueError:
        return None
    try:
        return OcrRequest.model_validate(body)
    except ValidationError:
        return None


@router.options(OCR_PATH)
async def ocr_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    OCR_PATH,
    response_model=WordsResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def extract_words(
    request: Request,
    x_request_id: str | None = Header(default=None),
    app_settings: Settings = Depends(get_settings),
    vision_client: Any = Depends(get_vision_client),
):  # type: ignore[no-untyped-def]
    started_at = perf_counter()
    ocr_request = await _read_ocr_request(request)
    if ocr_request is None or ocr_request.image is None or not ocr_request.image.data:
        logger.info("OCR request rejected: no image provided.")
        return error_response(status.HTTP_400_BAD_REQUEST, "No image provided")

    request_id = x_request_id or str(uuid.uuid4())
    logger.info(
        "OCR request accepted request_id=%s media_type=%s",
        request_id,
        ocr_request.image.media_type,
    )
    try:
        response = await run_in_threadpool(
            extract_words_from_image,
            request_id=request_id,
            image=ocr_request.image,
            settings=app_settings,
            client=vision_client,
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception(
            "OCR request request_id=%s: extraction crashed (%s), returning empty words.",
            request_id,
            exc.__class__.__name__,
        )
        response = WordsResponse(words=[])
    logger.info(
        "OCR request finished request_id=%s words=%s total_ms=%s",
        request_id,
        len(response.words),
        round((perf_counter() - started_at) * 1000, 1),
    )
    return response

