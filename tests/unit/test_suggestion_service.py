"""
Suggestion generator tests.

Run with: pytest tests/unit/test_suggestion_service.py -v
"""

import pytest


@pytest.fixture
def generator(search_service):
    from formbridge_support.services.suggestion_service import SuggestionGenerator

    return SuggestionGenerator(search_service)


class TestSuggestionGenerator:
    """SuggestionGenerator.suggest."""

    def test_related_entries_become_questions(self, generator):
        suggestions = generator.suggest("What is a caseworker?", "/")

        assert suggestions == [
            "What documents do I need?",
            "Tell me about saving your progress",
            "Tell me about caseworker",
        ]

    def test_unknown_query_uses_general_pool(self, generator):
        from formbridge_support.services.suggestion_service import GENERAL_SUGGESTIONS

        assert generator.suggest("asdlkjasdlkj nonsense", "/") == list(GENERAL_SUGGESTIONS[:3])

    def test_form_pages_offer_save_progress(self, generator):
        from formbridge_support.services.suggestion_service import (
            GENERAL_SUGGESTIONS,
            SAVE_PROGRESS_SUGGESTION,
        )

        suggestions = generator.suggest("asdlkjasdlkj nonsense", "/form/income")

        assert suggestions == [SAVE_PROGRESS_SUGGESTION, *GENERAL_SUGGESTIONS[:2]]

    def test_save_progress_respects_cap(self, generator):
        from formbridge_support.services.suggestion_service import SAVE_PROGRESS_SUGGESTION

        suggestions = generator.suggest("What is a caseworker?", "/form")

        assert len(suggestions) == 3
        assert SAVE_PROGRESS_SUGGESTION not in suggestions

    def test_never_duplicates_or_pads(self, search_service):
        from formbridge_support.services.suggestion_service import SuggestionGenerator

        generator = SuggestionGenerator(search_service, general_pool=("Same?", "Same?"))

        assert generator.suggest("asdlkjasdlkj", "/") == ["Same?"]

    def test_exhausted_pools_return_empty(self, search_service):
        from formbridge_support.services.suggestion_service import SuggestionGenerator

        assert SuggestionGenerator(search_service, general_pool=()).suggest("zzz", "/") == []

    @pytest.mark.parametrize(
        "query,page",
        [
            ("caseworker documents save progress postal", "/form"),
            ("documents", "/"),
            ("postal", "/form/assets"),
            ("", ""),
        ],
    )
    def test_unique_and_capped(self, generator, query, page):
        suggestions = generator.suggest(query, page)

        assert len(suggestions) <= 3
        assert len(set(suggestions)) == len(suggestions)


@pytest.mark.parametrize(
    "title,expected",
    [
        ("What documents do I need?", "What documents do I need?"),
        ("Saving Your Progress", "Tell me about saving your progress"),
        ("  Caseworker ", "Tell me about caseworker"),
    ],
)
def test_follow_up_wording(title, expected):
    from formbridge_support.services.suggestion_service import follow_up_for

    assert follow_up_for(title) == expected
