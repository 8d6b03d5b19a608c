from time import perf_counter
from typing import Any

from anthropic import Anthropic
from pydantic import ValidationError

from api.core.config import Settings
from api.models.ocr import ImagePayload, WordEntry, WordsResponse
from vocab_ocr.json_recovery import recover_json_array
from vocab_ocr.logging_config import logger
from vocab_ocr.ocr_prompt import build_user_content


def _first_text_block(message: Any) -> str:
    for block in getattr(message, "content", None) or []:
        if getattr(block, "type", None) == "text":
            return getattr(block, "text", "") or ""
    return ""


def normalize_entries(items: list[Any]) -> tuple[list[WordEntry], int]:
    entries: list[WordEntry] = []
    dropped = 0
    for item in items:
        try:
            entries.append(WordEntry.model_validate(item))
        except ValidationError:
            dropped += 1
    return entries, dropped


def _call_model(client: Any, settings: Settings, image: ImagePayload) -> Any:
    return client.messages.create(
        model=settings.ocr_model,
        max_tokens=settings.ocr_max_tokens,
        messages=[
            {
                "role": "user",
                "content": build_user_content(image.media_type, image.data),
            }
        ],
    )


def _done(request_id: str, model_name: str, words: list[WordEntry], started_at: float) -> WordsResponse:
    logger.info(
        "OCR extraction done request_id=%s model=%s words=%s duration_ms=%s",
        request_id,
        model_name,
        len(words),
        round((perf_counter() - started_at) * 1000, 1),
    )
    return WordsResponse(words=words)


def extract_words_from_image(
    *,
    request_id: str,
    image: ImagePayload,
    settings: Settings,
    client: Any = None,
) -> WordsResponse:
    started_at = perf_counter()
    model_name = settings.ocr_model
    logger.info(
        "OCR extraction start request_id=%s model=%s media_type=%s image_base64_chars=%s",
        request_id,
        model_name,
        image.media_type,
        len(image.data),
    )

    if client is None and not settings.anthropic_api_key:
        logger.warning(
            "OCR extraction request_id=%s: ANTHROPIC_API_KEY missing, returning empty words.",
            request_id,
        )
        return _done(request_id, model_name, [], started_at)

    try:
        if client is None:
            # Built per request, closed on exit.
            with Anthropic(api_key=settings.anthropic_api_key) as owned_client:
                message = _call_model(owned_client, settings, image)
        else:
            message = _call_model(client, settings, image)
    except Exception as exc:  # noqa: BLE001
        logger.exception(
            "OCR extraction request_id=%s: model call failed (%s), returning empty words.",
            request_id,
            exc.__class__.__name__,
        )
        return _done(request_id, model_name, [], started_at)

    response_text = _first_text_block(message).strip()
    logger.info(
        "OCR extraction model reply request_id=%s text_chars=%s",
        request_id,
        len(response_text),
    )

    items, strategy = recover_json_array(response_text)
    if items is None:
        logger.warning(
            "OCR extraction request_id=%s: no JSON array in model reply, returning empty words. raw=%r",
            request_id,
            response_text,
        )
        return _done(request_id, model_name, [], started_at)

    words, dropped = normalize_entries(items)
    logger.info(
        "OCR extraction parsed request_id=%s strategy=%s items=%s kept=%s dropped=%s",
        request_id,
        strategy,
        len(items),
        len(words),
        dropped,
    )
    return _done(request_id, model_name, words, started_at)
