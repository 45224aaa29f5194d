"""Pydantic models for the support chat request/response cycle."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Accept and emit camelCase keys on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Confidence(str, Enum):
    """How well a query is grounded in the knowledge base."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class ChatMessage(_CamelModel):
    """A single prior conversation turn."""

    role: Role
    content: str
    timestamp: Optional[datetime] = None


class SupportChatRequest(_CamelModel):
    """Inbound chat payload, validated before it reaches the retrieval core."""

    message: str
    conversation_history: List[ChatMessage] = Field(default_factory=list)
    page_path: str = "/"
    knowledge_context: Optional[str] = None
    additional_context: Optional[str] = None
    language: str = "en"

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        """Reject blank messages early to avoid wasting model calls."""
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("message must be a non-empty string")
        return cleaned

    @field_validator("page_path", mode="before")
    @classmethod
    def default_page_path(cls, value):
        if value is None or value == "":
            return "/"
        return value

    @field_validator("language", mode="before")
    @classmethod
    def default_language(cls, value):
        if not isinstance(value, str):
            # Non-strings fall through to the str check and fail validation.
            return "en" if value is None else value
        return value.strip().lower() or "en"

    @field_validator("conversation_history", mode="before")
    @classmethod
    def default_history(cls, value):
        return [] if value is None else value


class StructuredHelp(_CamelModel):
    """Parsed answer to a selected-text help request."""

    interpretation: str
    breakdown: List[str] = Field(default_factory=list)
    suggested_questions: List[str] = Field(default_factory=list)


class SupportChatResponse(_CamelModel):
    """Reply returned for every chat request, including fallbacks."""

    message: str
    suggestions: List[str] = Field(default_factory=list, max_length=3)
    knowledge_used: Optional[List[str]] = None
    confidence: Confidence
    structured: Optional[StructuredHelp] = None
