"""Pydantic models for the knowledge base and the support chat API."""

from formbridge_support.models.chat import (  # noqa: F401
    ChatMessage,
    Confidence,
    Role,
    StructuredHelp,
    SupportChatRequest,
    SupportChatResponse,
)
from formbridge_support.models.knowledge import (  # noqa: F401
    Category,
    KnowledgeEntry,
    SearchResult,
)
