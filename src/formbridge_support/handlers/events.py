"""Helpers for reading API Gateway HTTP API proxy events."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict, Tuple

from formbridge_support.utils.error_handling import ValidationError

API_PREFIX = "/api"


def route_of(event: Dict[str, Any]) -> Tuple[str, str]:
    """Return (METHOD, normalised path) for HTTP API v2 or REST v1 events."""
    http = event.get("requestContext", {}).get("http", {})
    method = (http.get("method") or event.get("httpMethod") or "").upper()
    path = http.get("path") or event.get("rawPath") or event.get("path") or ""

    if path == API_PREFIX or path.startswith(API_PREFIX + "/"):
        path = path[len(API_PREFIX):]
    if len(path) > 1:
        path = path.rstrip("/")
    return method, path or "/"


def json_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decode the JSON body; direct invocations pass the payload as the event itself.
    """
    body = event.get("body")
    if not body:
        return event

    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        payload = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValidationError("Request body must be valid JSON") from exc

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def query_params(event: Dict[str, Any]) -> Dict[str, str]:
    return event.get("queryStringParameters") or {}
