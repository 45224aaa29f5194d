"""
Free-text relevance search over the knowledge store.

Scoring keeps a fixed ordinal priority between signals:
title phrase > keyword phrase > keyword token > content token > category bonus.
Entry text is normalised once when the service is built; a search is then a
single pass over the store with no I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from formbridge_support.models.knowledge import (
    STRONG_CATEGORIES,
    KnowledgeEntry,
    SearchResult,
)
from formbridge_support.services.knowledge_store import KnowledgeStore
from formbridge_support.utils.logging_config import get_logger

logger = get_logger(__name__)

TITLE_WEIGHT = 10.0
KEYWORD_PHRASE_WEIGHT = 5.0
KEYWORD_TOKEN_WEIGHT = 2.0
CONTENT_TOKEN_WEIGHT = 1.0
CONTENT_HIT_CAP = 3
CATEGORY_BONUS = 0.5

# Words that carry no retrieval signal; without this "what" matches half the corpus.
STOPWORDS: FrozenSet[str] = frozenset(
    {
        "a", "about", "am", "an", "and", "are", "as", "at", "be", "by", "can",
        "do", "does", "for", "from", "how", "i", "if", "in", "is", "it", "me",
        "mean", "means", "my", "of", "on", "or", "so", "tell", "that", "the",
        "this", "to", "what", "whats", "when", "where", "which", "who", "why",
        "with", "you", "your",
    }
)

_WORD_RE = re.compile(r"[^\W_]+")


def normalize(text: str) -> str:
    """Casefold, drop punctuation and collapse whitespace to single spaces."""
    return " ".join(_WORD_RE.findall((text or "").casefold()))


def query_tokens(normalized: str) -> Tuple[str, ...]:
    """Distinct meaningful tokens in query order."""
    seen = []
    for token in normalized.split():
        if len(token) > 1 and token not in STOPWORDS and token not in seen:
            seen.append(token)
    return tuple(seen)


def _contains(haystack: str, needle: str) -> bool:
    """
    Substring containment on normalised strings, anchored at a word start.

    Plurals and partial words match ("refugees" contains "refugee", "casework"
    is in "caseworker"), but a short keyword such as "sin" does not fire
    inside "business".
    """
    if not needle:
        return False
    return haystack.startswith(needle) or f" {needle}" in haystack


@dataclass(frozen=True)
class _IndexedEntry:
    entry: KnowledgeEntry
    title: str
    keywords: Tuple[str, ...]
    content_tokens: FrozenSet[str]

    @classmethod
    def build(cls, entry: KnowledgeEntry) -> "_IndexedEntry":
        keywords = tuple(k for k in (normalize(kw) for kw in entry.keywords) if k)
        return cls(
            entry=entry,
            title=normalize(entry.title),
            keywords=keywords,
            content_tokens=frozenset(normalize(entry.content).split()),
        )


class SearchService:
    """Rank knowledge entries against a query."""

    def __init__(self, store: KnowledgeStore) -> None:
        self.store = store
        self._index: Tuple[_IndexedEntry, ...] = tuple(
            _IndexedEntry.build(entry) for entry in store.all_entries()
        )

    def search(self, query: str, limit: int = 5) -> List[SearchResult]:
        """
        Return at most ``limit`` results, best first.

        Ties keep load order because the sort is stable over the store's
        iteration order, so identical inputs always give identical output.
        """
        if limit < 0:
            raise ValueError("limit must be a non-negative integer")

        normalized = normalize(query)
        tokens = query_tokens(normalized)
        if limit == 0 or not tokens:
            return []

        scored: List[SearchResult] = []
        for indexed in self._index:
            score = self._score(indexed, normalized, tokens)
            if score > 0:
                scored.append(SearchResult(entry=indexed.entry, score=score))

        results = sorted(scored, key=lambda result: result.score, reverse=True)[:limit]
        logger.debug(
            "Knowledge search complete",
            extra={
                "query_length": len(normalized),
                "matched": len(scored),
                "returned": len(results),
            },
        )
        return results

    def _score(
        self, indexed: _IndexedEntry, normalized: str, tokens: Tuple[str, ...]
    ) -> float:
        score = 0.0

        if _contains(indexed.title, normalized) or _contains(normalized, indexed.title):
            score += TITLE_WEIGHT

        for phrase in indexed.keywords:
            if _contains(phrase, normalized) or _contains(normalized, phrase):
                score += KEYWORD_PHRASE_WEIGHT
            score += KEYWORD_TOKEN_WEIGHT * sum(1 for t in tokens if _contains(phrase, t))

        content_hits = sum(1 for t in tokens if t in indexed.content_tokens)
        score += CONTENT_TOKEN_WEIGHT * min(content_hits, CONTENT_HIT_CAP)

        if score > 0 and indexed.entry.category in STRONG_CATEGORIES:
            score += CATEGORY_BONUS
        return score
