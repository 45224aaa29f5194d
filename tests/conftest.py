"""
Pytest configuration to ensure paths are set up correctly for tests.

Adds src/ to sys.path so `formbridge_support` imports work without an
editable install, adds the repository root for `infrastructure.*`, and
sets offline AWS defaults so boto3 never needs real credentials.
"""

import os
import sys
from pathlib import Path

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing."""
    repo_root = Path(__file__).resolve().parents[1]
    for path in (repo_root, repo_root / "src"):
        path_str = str(path)
        if path_str not in sys.path:
            sys.path.insert(0, path_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("BEDROCK_REGION", "eu-west-2")
os.environ.setdefault("MODEL_ID", "anthropic.claude-3-haiku-20240307-v1:0")

boto3.setup_default_session(region_name="eu-west-2")


class FakeGenerationClient:
    """Records prompts and returns a canned reply, or raises when told to."""

    def __init__(self, reply="Here is a plain-language answer.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, prompt, *, max_output_tokens, temperature):
        self.calls.append(
            {"prompt": prompt, "max_output_tokens": max_output_tokens, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return self.reply


def _entry(entry_id, category, title, content, keywords=(), related=(), pages=()):
    from formbridge_support.models.knowledge import KnowledgeEntry

    return KnowledgeEntry(
        id=entry_id,
        category=category,
        title=title,
        content=content,
        keywords=keywords,
        related_entries=related,
        page_context=pages,
    )


@pytest.fixture
def sample_entries():
    """Small corpus covering every category, with one dangling related id."""
    from formbridge_support.models.knowledge import Category

    return [
        _entry(
            "term-caseworker",
            Category.TERMINOLOGY,
            "Caseworker",
            "A caseworker is the staff member who reviews your application.",
            keywords=("caseworker", "case worker"),
            related=("faq-documents", "missing-entry", "guide-save"),
        ),
        _entry(
            "faq-documents",
            Category.FAQ,
            "What documents do I need?",
            "Bring ID, proof of address and bank statements. Your caseworker can help.",
            keywords=("documents", "papers", "proof"),
            related=("term-caseworker",),
        ),
        _entry(
            "guide-save",
            Category.GUIDE,
            "Saving Your Progress",
            "Answers are saved automatically. Use the session code to continue later.",
            keywords=("save", "progress", "session"),
        ),
        _entry(
            "page-income",
            Category.PAGE_CONTEXT,
            "Income Section",
            "Tell us about your income from all sources.",
            related=("guide-save",),
            pages=("/form/income",),
        ),
        _entry(
            "rule-postal",
            Category.VALIDATION_RULE,
            "Postal Code Rules",
            "Must be a valid Canadian postal code such as M5V 1A1.",
            keywords=("postal code", "postal"),
        ),
    ]


@pytest.fixture
def sample_store(sample_entries):
    from formbridge_support.services.knowledge_store import KnowledgeStore

    return KnowledgeStore(sample_entries)


@pytest.fixture
def search_service(sample_store):
    from formbridge_support.services.search_service import SearchService

    return SearchService(sample_store)


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def chat_service(sample_store, fake_client):
    from formbridge_support.config.settings import Settings
    from formbridge_support.services.support_chat_service import SupportChatService

    return SupportChatService(store=sample_store, generation_client=fake_client, settings=Settings())


@pytest.fixture
def client_factory():
    """Build extra fake clients, e.g. ones that raise."""
    return FakeGenerationClient
