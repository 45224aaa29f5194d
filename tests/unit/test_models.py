"""
Unit tests for the chat and knowledge models.

Run with: pytest tests/unit/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from formbridge_support.models.chat import (
    Confidence,
    Role,
    StructuredHelp,
    SupportChatRequest,
    SupportChatResponse,
)
from formbridge_support.models.knowledge import Category, KnowledgeEntry, SearchResult


class TestSupportChatRequest:
    def test_defaults(self):
        request = SupportChatRequest.model_validate({"message": "  What is SIN?  "})

        assert request.message == "What is SIN?"
        assert request.page_path == "/"
        assert request.language == "en"
        assert request.conversation_history == []
        assert request.knowledge_context is None
        assert request.additional_context is None

    def test_camel_case_fields(self):
        request = SupportChatRequest.model_validate(
            {
                "message": "hi",
                "pagePath": "/form/income",
                "language": "FR",
                "knowledgeContext": "field help",
                "conversationHistory": [
                    {"role": "user", "content": "a", "timestamp": "2024-01-01T00:00:00Z"},
                    {"role": "assistant", "content": "b"},
                ],
            }
        )

        assert request.page_path == "/form/income"
        assert request.language == "fr"
        assert request.knowledge_context == "field help"
        assert [turn.role for turn in request.conversation_history] == [Role.USER, Role.ASSISTANT]
        assert request.conversation_history[0].timestamp is not None

    def test_null_optional_fields_fall_back(self):
        request = SupportChatRequest.model_validate(
            {"message": "hi", "pagePath": None, "language": None, "conversationHistory": None}
        )

        assert request.page_path == "/"
        assert request.language == "en"
        assert request.conversation_history == []

    def test_blank_message_rejected(self):
        with pytest.raises(ValidationError):
            SupportChatRequest.model_validate({"message": "   "})

    @pytest.mark.parametrize("language", [5, ["fr"], {"code": "fr"}])
    def test_non_string_language_rejected(self, language):
        with pytest.raises(ValidationError):
            SupportChatRequest.model_validate({"message": "hi", "language": language})

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            SupportChatRequest.model_validate(
                {"message": "hi", "conversationHistory": [{"role": "system", "content": "x"}]}
            )


class TestSupportChatResponse:
    def test_payload_uses_camel_case_and_drops_none(self):
        response = SupportChatResponse(
            message="Hello",
            suggestions=["One?"],
            knowledge_used=["term-sin"],
            confidence=Confidence.HIGH,
        )

        assert response.to_payload() == {
            "message": "Hello",
            "suggestions": ["One?"],
            "knowledgeUsed": ["term-sin"],
            "confidence": "high",
        }

    def test_structured_help_serialised(self):
        response = SupportChatResponse(
            message="Hello",
            confidence=Confidence.MEDIUM,
            structured=StructuredHelp(
                interpretation="It means X",
                breakdown=["a"],
                suggested_questions=["Why?"],
            ),
        )

        payload = response.to_payload()
        assert "knowledgeUsed" not in payload
        assert payload["structured"]["suggestedQuestions"] == ["Why?"]

    def test_more_than_three_suggestions_rejected(self):
        with pytest.raises(ValidationError):
            SupportChatResponse(
                message="x", suggestions=["a", "b", "c", "d"], confidence=Confidence.LOW
            )


class TestKnowledgeEntry:
    def test_entry_is_frozen(self):
        entry = KnowledgeEntry(
            id="term-x", category=Category.TERMINOLOGY, title="X", content="x"
        )

        with pytest.raises(ValidationError):
            entry.title = "changed"

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError):
            KnowledgeEntry(id=" ", category="faq", title="X", content="x")

    def test_accepts_camel_case_input(self):
        entry = KnowledgeEntry.model_validate(
            {
                "id": "page-x",
                "category": "page-context",
                "title": "X",
                "content": "x",
                "relatedEntries": ["a"],
                "pageContext": ["/x"],
            }
        )

        assert entry.category is Category.PAGE_CONTEXT
        assert entry.related_entries == ("a",)
        assert entry.page_context == ("/x",)

    def test_search_result_summary(self):
        entry = KnowledgeEntry(id="faq-x", category="faq", title="X?", content="Answer")
        result = SearchResult(entry=entry, score=3.5)

        assert result.is_strong
        assert result.summary() == {
            "id": "faq-x",
            "category": "faq",
            "title": "X?",
            "content": "Answer",
        }
