"""Knowledge base models."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Kinds of knowledge entries."""

    TERMINOLOGY = "terminology"
    FAQ = "faq"
    PAGE_CONTEXT = "page-context"
    VALIDATION_RULE = "validation-rule"
    GUIDE = "guide"


# Results from these categories count as strong matches for confidence.
STRONG_CATEGORIES = frozenset({Category.TERMINOLOGY, Category.FAQ})


class KnowledgeEntry(BaseModel):
    """One read-only unit of the knowledge base."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    category: Category
    title: str
    content: str
    keywords: Tuple[str, ...] = ()
    related_entries: Tuple[str, ...] = Field(
        default=(), description="Weak references to other entry ids, used for suggestions"
    )
    page_context: Tuple[str, ...] = Field(
        default=(), description="Routes this entry belongs to"
    )

    @field_validator("id", "title")
    @classmethod
    def validate_required(cls, value: str) -> str:
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("id and title must be provided")
        return cleaned


class SearchResult(BaseModel):
    """A knowledge entry scored against a single query. Never persisted."""

    entry: KnowledgeEntry
    score: float

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def category(self) -> Category:
        return self.entry.category

    @property
    def title(self) -> str:
        return self.entry.title

    @property
    def is_strong(self) -> bool:
        return self.entry.category in STRONG_CATEGORIES

    def summary(self) -> dict:
        """Shape used by the knowledge search endpoint."""
        return {
            "id": self.entry.id,
            "category": self.entry.category.value,
            "title": self.entry.title,
            "content": self.entry.content,
        }
