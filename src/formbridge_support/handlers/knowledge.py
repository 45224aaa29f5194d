"""
Knowledge base lookup handlers.

GET /support-chat/knowledge?q=<text>&limit=<n> runs a search directly;
GET /support-chat/knowledge/<id> returns one raw entry.
"""

from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import unquote

from formbridge_support.handlers import dependencies
from formbridge_support.handlers.events import query_params, route_of
from formbridge_support.utils.error_handling import (
    AppError,
    NotFoundError,
    ValidationError,
    json_response,
    to_response,
)
from formbridge_support.utils.logging_config import get_logger
from formbridge_support.utils.validators import ensure_present

logger = get_logger(__name__)

ENTRY_ROUTE_PREFIX = "/support-chat/knowledge/"


def parse_limit(raw: Optional[str], default: int, maximum: int) -> int:
    """Non-integers fall back to the default; negatives are rejected; large values are capped."""
    try:
        limit = int(raw) if raw not in (None, "") else default
    except (TypeError, ValueError):
        limit = default
    if limit < 0:
        raise ValidationError("limit must be a non-negative integer")
    return min(limit, maximum)


def search_handler(event, context) -> Dict:
    """Handle GET /support-chat/knowledge."""
    params = query_params(event)
    query = params.get("q")
    try:
        try:
            ensure_present(query, "q")
        except ValueError as exc:
            raise ValidationError("Missing query parameter: q") from exc

        settings = dependencies.get_settings()
        limit = parse_limit(
            params.get("limit"), settings.default_search_limit, settings.max_search_limit
        )
    except AppError as exc:
        return to_response(exc)

    results = dependencies.get_search_service().search(query, limit)
    logger.info(
        "Knowledge search served",
        extra={"query_length": len(query), "limit": limit, "count": len(results)},
    )
    return json_response(
        200,
        {
            "query": query,
            "count": len(results),
            "results": [result.summary() for result in results],
        },
    )


def _entry_id(event) -> str:
    entry_id = (event.get("pathParameters") or {}).get("id")
    if entry_id:
        return unquote(entry_id)
    _, path = route_of(event)
    return unquote(path[len(ENTRY_ROUTE_PREFIX):]) if path.startswith(ENTRY_ROUTE_PREFIX) else ""


def entry_handler(event, context) -> Dict:
    """Handle GET /support-chat/knowledge/<id>."""
    entry = dependencies.get_store().get_entry(_entry_id(event))
    if entry is None:
        return to_response(NotFoundError("Knowledge entry not found"))
    return json_response(200, entry.model_dump(mode="json", by_alias=True))
