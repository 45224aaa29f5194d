"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

The knowledge store is loaded at import time: a corpus with duplicate ids
fails the cold start instead of serving degraded answers.
"""

from typing import Callable, Dict, Tuple

from formbridge_support.handlers import dependencies
from formbridge_support.handlers import health_check, knowledge, support_chat
from formbridge_support.handlers.events import route_of
from formbridge_support.utils.error_handling import json_response

dependencies.get_store()


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    Exact routes are checked first, then the one path-parameter route.
    """
    method, path = route_of(event)
    route_key = f"{method} {path}"

    exact_routes: Dict[str, Callable] = {
        "GET /health": health_check.lambda_handler,
        "POST /support-chat": support_chat.lambda_handler,
        "GET /support-chat/knowledge": knowledge.search_handler,
    }
    prefix_routes: Tuple[Tuple[str, Callable], ...] = (
        ("GET " + knowledge.ENTRY_ROUTE_PREFIX, knowledge.entry_handler),
    )

    handler = exact_routes.get(route_key)
    if handler is not None:
        return handler(event, context)

    for prefix, prefixed_handler in prefix_routes:
        if route_key.startswith(prefix):
            return prefixed_handler(event, context)

    return json_response(404, {"error": "Route not found", "route": route_key})
