"""
Support chat handler for POST /support-chat.

Malformed requests get a 4xx; every valid request gets a 200 with a
SupportChatResponse, including the apology produced on model failure.
"""

from __future__ import annotations

import time
import uuid
from typing import Dict

from pydantic import ValidationError as PydanticValidationError

from formbridge_support.handlers import dependencies
from formbridge_support.handlers.events import json_body
from formbridge_support.models.chat import SupportChatRequest
from formbridge_support.utils.error_handling import (
    AppError,
    KnowledgeStoreError,
    ValidationError,
    json_response,
    to_response,
)
from formbridge_support.utils.logging_config import get_logger

logger = get_logger(__name__)


def parse_request(payload: Dict) -> SupportChatRequest:
    """Validate the inbound payload before it reaches the retrieval core."""
    message = payload.get("message")
    if not isinstance(message, str) or not message.strip():
        raise ValidationError("Missing required field: message")

    try:
        return SupportChatRequest.model_validate(payload)
    except PydanticValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ValidationError(f"Invalid request: {details}") from exc


def lambda_handler(event, context) -> Dict:
    """Handle POST /support-chat."""
    start = time.perf_counter()
    correlation_id = str(uuid.uuid4())

    try:
        request = parse_request(json_body(event))
    except AppError as exc:
        logger.info(
            "Rejected support chat request",
            extra={"correlation_id": correlation_id, "reason": str(exc)},
        )
        return to_response(exc)

    try:
        service = dependencies.get_chat_service()
    except KnowledgeStoreError:
        raise
    except Exception:
        logger.exception("Support chat service unavailable", extra={"correlation_id": correlation_id})
        return json_response(503, {"error": "Support chat is temporarily unavailable"})

    response = service.respond(request, correlation_id=correlation_id)

    logger.info(
        "Support chat answered",
        extra={
            "correlation_id": correlation_id,
            "confidence": response.confidence.value,
            "message_length": len(request.message),
            "history_turns": len(request.conversation_history),
            "duration_ms": int((time.perf_counter() - start) * 1000),
        },
    )
    return json_response(200, response.to_payload())
