"""
Per-container singletons shared by the handlers.

Everything is built at most once per warm container. The model client is
created here and injected into the chat service; the core never builds it.
"""

from __future__ import annotations

from typing import Optional

from formbridge_support.config.settings import Settings
from formbridge_support.services.knowledge_store import KnowledgeStore

_settings: Optional[Settings] = None
_store: Optional[KnowledgeStore] = None
_search_service = None
_chat_service = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_environment()
    return _settings


def get_store() -> KnowledgeStore:
    """Load the bundled corpus; a duplicate id raises KnowledgeStoreError."""
    global _store
    if _store is None:
        _store = KnowledgeStore.load_default()
    return _store


def get_search_service():
    """Lazy-load SearchService."""
    global _search_service
    if _search_service is None:
        from formbridge_support.services.search_service import SearchService
        _search_service = SearchService(get_store())
    return _search_service


def get_chat_service():
    """Lazy-load SupportChatService with a Bedrock generation client."""
    global _chat_service
    if _chat_service is None:
        from formbridge_support.services.bedrock_service import BedrockGenerationClient
        from formbridge_support.services.support_chat_service import SupportChatService

        settings = get_settings()
        _chat_service = SupportChatService(
            store=get_store(),
            generation_client=BedrockGenerationClient.from_settings(settings),
            settings=settings,
        )
    return _chat_service
