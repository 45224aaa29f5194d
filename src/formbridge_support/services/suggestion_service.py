"""Follow-up question suggestions attached to every chat reply."""

from __future__ import annotations

from typing import List, Sequence

from formbridge_support.services.search_service import SearchService

MAX_SUGGESTIONS = 3
SUGGESTION_SEARCH_LIMIT = 3
SAVE_PROGRESS_SUGGESTION = "How do I save my progress?"

GENERAL_SUGGESTIONS: Sequence[str] = (
    "What documents do I need?",
    "Am I eligible for Ontario Works?",
    "How long does the process take?",
)

# Returned when the grounded path fails.
ERROR_SUGGESTIONS: Sequence[str] = (
    "What documents do I need?",
    "Am I eligible for Ontario Works?",
)


class SuggestionGenerator:
    """Related entries first, then page hints, then the general pool. Never repeats."""

    def __init__(
        self,
        search_service: SearchService,
        general_pool: Sequence[str] = GENERAL_SUGGESTIONS,
    ) -> None:
        self.search_service = search_service
        self.general_pool = tuple(general_pool)

    def suggest(self, query: str, page_path: str = "/") -> List[str]:
        suggestions: List[str] = []

        for result in self.search_service.search(query, SUGGESTION_SEARCH_LIMIT):
            for related in self.search_service.store.resolve(result.entry.related_entries):
                if len(suggestions) >= MAX_SUGGESTIONS:
                    break
                _add_unique(suggestions, follow_up_for(related.title))
            if len(suggestions) >= MAX_SUGGESTIONS:
                break

        if "form" in (page_path or ""):
            _add_unique(suggestions, SAVE_PROGRESS_SUGGESTION)

        for candidate in self.general_pool:
            if len(suggestions) >= MAX_SUGGESTIONS:
                break
            _add_unique(suggestions, candidate)

        return suggestions[:MAX_SUGGESTIONS]


def follow_up_for(title: str) -> str:
    """Question-style titles are already follow-ups; other titles become topics."""
    title = title.strip()
    if title.endswith("?"):
        return title
    return f"Tell me about {title.lower()}"


def _add_unique(suggestions: List[str], candidate: str) -> None:
    if candidate not in suggestions:
        suggestions.append(candidate)
