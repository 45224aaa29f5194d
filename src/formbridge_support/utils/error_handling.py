"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors surfaced to HTTP callers."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationError(AppError):
    """Raised when request input validation fails."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=400)


class KnowledgeStoreError(Exception):
    """
    Fatal configuration error while loading the knowledge base.

    Not an AppError on purpose: handlers never translate it into a response,
    so a broken corpus stops the container from serving traffic.
    """


class GenerationError(Exception):
    """Raised by generation clients when the model call fails or returns nothing usable."""

    def __init__(self, message: str, code: str = ""):
        super().__init__(message)
        self.code = code


def json_response(status: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return json_response(error.status_code, {"error": str(error)})
