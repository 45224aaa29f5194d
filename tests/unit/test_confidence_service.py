"""
Confidence classification tests.

Run with: pytest tests/unit/test_confidence_service.py -v
"""

import pytest


@pytest.fixture
def classifier(search_service):
    from formbridge_support.services.confidence_service import ConfidenceClassifier

    return ConfidenceClassifier(search_service)


class TestConfidenceClassifier:
    """Priority ladder: unknown, high, medium, low."""

    def test_no_results_is_unknown(self, classifier):
        from formbridge_support.models.chat import Confidence

        assert classifier.classify("asdlkjasdlkj nonsense") == Confidence.UNKNOWN

    def test_strong_match_with_support_is_high(self, classifier):
        from formbridge_support.models.chat import Confidence

        assert classifier.classify("What is a caseworker?") == Confidence.HIGH

    def test_single_strong_match_is_medium(self, classifier):
        from formbridge_support.models.chat import Confidence

        assert classifier.classify("documents") == Confidence.MEDIUM

    def test_two_weak_matches_are_medium(self, classifier):
        from formbridge_support.models.chat import Confidence

        assert classifier.classify("postal session") == Confidence.MEDIUM

    def test_single_weak_match_is_low(self, classifier):
        from formbridge_support.models.chat import Confidence

        assert classifier.classify("postal") == Confidence.LOW

    def test_from_results_empty(self):
        from formbridge_support.models.chat import Confidence
        from formbridge_support.services.confidence_service import ConfidenceClassifier

        assert ConfidenceClassifier.from_results([]) == Confidence.UNKNOWN

    def test_default_corpus_caseworker_question_is_high(self):
        from formbridge_support.models.chat import Confidence
        from formbridge_support.services.confidence_service import ConfidenceClassifier
        from formbridge_support.services.knowledge_store import KnowledgeStore
        from formbridge_support.services.search_service import SearchService

        search = SearchService(KnowledgeStore.load_default())
        classifier = ConfidenceClassifier(search)

        assert classifier.classify("What is a caseworker?") == Confidence.HIGH
        assert search.search("What is a caseworker?", 3)[0].id == "term-caseworker"
