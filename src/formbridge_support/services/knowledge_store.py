"""
In-memory knowledge entry store.

Loaded once per container and read-only afterwards, so concurrent requests
can search it without locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Optional, Tuple

from formbridge_support.models.knowledge import Category, KnowledgeEntry
from formbridge_support.utils.error_handling import KnowledgeStoreError
from formbridge_support.utils.logging_config import get_logger

logger = get_logger(__name__)


class KnowledgeStore:
    """Immutable collection of knowledge entries keyed by id, iterated in load order."""

    def __init__(self, entries: Iterable[KnowledgeEntry]) -> None:
        ordered: List[KnowledgeEntry] = []
        by_id = {}
        for entry in entries:
            if entry.id in by_id:
                raise KnowledgeStoreError(f"Duplicate knowledge entry id: {entry.id}")
            by_id[entry.id] = entry
            ordered.append(entry)

        self._entries: Tuple[KnowledgeEntry, ...] = tuple(ordered)
        self._by_id = MappingProxyType(by_id)
        logger.info("Knowledge store loaded", extra={"entry_count": len(ordered)})

    @classmethod
    def load_default(cls) -> "KnowledgeStore":
        """Build the store from the bundled corpus."""
        from formbridge_support.data.knowledge_entries import ALL_ENTRIES

        return cls(ALL_ENTRIES)

    def __len__(self) -> int:
        return len(self._entries)

    def get_entry(self, entry_id: str) -> Optional[KnowledgeEntry]:
        return self._by_id.get(entry_id)

    def all_entries(self) -> Tuple[KnowledgeEntry, ...]:
        return self._entries

    def by_category(self, category: Category | str) -> List[KnowledgeEntry]:
        wanted = Category(category)
        return [entry for entry in self._entries if entry.category == wanted]

    def page_entry(self, path: str) -> Optional[KnowledgeEntry]:
        """
        Page-context entry for a route.

        An exact route match wins; otherwise the longest route that is a parent
        segment of the path (so ``/form/income/step-2`` resolves to the income
        section). The root route only matches exactly.
        """
        if not path:
            return None

        path = path.split("?", 1)[0]
        if len(path) > 1:
            path = path.rstrip("/")

        best: Optional[KnowledgeEntry] = None
        best_len = -1
        for entry in self.by_category(Category.PAGE_CONTEXT):
            for route in entry.page_context:
                if route == path:
                    return entry
                if route != "/" and path.startswith(route + "/") and len(route) > best_len:
                    best, best_len = entry, len(route)
        return best

    def page_knowledge(self, path: str) -> List[KnowledgeEntry]:
        """Entries linked from the page-context entry for ``path``; dangling ids skipped."""
        page = self.page_entry(path)
        if page is None:
            return []
        return self.resolve(page.related_entries)

    def resolve(self, entry_ids: Iterable[str]) -> List[KnowledgeEntry]:
        resolved = []
        for entry_id in entry_ids:
            entry = self._by_id.get(entry_id)
            if entry is not None:
                resolved.append(entry)
        return resolved
