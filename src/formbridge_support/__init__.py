"""FormBridge support assistant: knowledge base retrieval and chat orchestration."""

__version__ = "0.1.0"
