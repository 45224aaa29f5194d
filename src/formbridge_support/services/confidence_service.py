"""
Confidence classification.

Decides, before any model spend, how well a question is grounded in the
knowledge base. ``unknown`` means the model is never called.
"""

from __future__ import annotations

from typing import List

from formbridge_support.models.chat import Confidence
from formbridge_support.models.knowledge import SearchResult
from formbridge_support.services.search_service import SearchService
from formbridge_support.utils.logging_config import get_logger

logger = get_logger(__name__)

CONFIDENCE_SEARCH_LIMIT = 3


class ConfidenceClassifier:
    """Priority ladder over the top search results."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    def classify(self, query: str) -> Confidence:
        results = self.search_service.search(query, CONFIDENCE_SEARCH_LIMIT)
        confidence = self.from_results(results)
        logger.info(
            "Confidence determined",
            extra={"confidence": confidence.value, "result_count": len(results)},
        )
        return confidence

    @staticmethod
    def from_results(results: List[SearchResult]) -> Confidence:
        """Evaluate tiers in order and return the first that holds."""
        if not results:
            return Confidence.UNKNOWN

        has_strong_match = any(result.is_strong for result in results)
        if has_strong_match and len(results) >= 2:
            return Confidence.HIGH
        if has_strong_match or len(results) >= 2:
            return Confidence.MEDIUM
        return Confidence.LOW
