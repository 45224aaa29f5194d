"""
Support chat orchestration.

Two paths:
- unknown: nothing in the knowledge base matches, so reply with a canned
  "don't know" answer and never call the model;
- grounded: assemble the prompt, call the injected generation client once,
  and attach knowledge ids and follow-up suggestions.
Any failure on either path becomes a fixed apology with ``unknown`` confidence.
"""

from __future__ import annotations

import time
import zlib
from typing import Optional

from formbridge_support.config.settings import Settings
from formbridge_support.models.chat import (
    Confidence,
    SupportChatRequest,
    SupportChatResponse,
)
from formbridge_support.services.bedrock_service import GenerationClient
from formbridge_support.services.confidence_service import ConfidenceClassifier
from formbridge_support.services.knowledge_store import KnowledgeStore
from formbridge_support.services.prompt_service import PromptAssembler
from formbridge_support.services.search_service import SearchService, normalize
from formbridge_support.services.selection_help import (
    is_selection_help_request,
    parse_structured_help,
    render_structured_help,
)
from formbridge_support.services.suggestion_service import (
    ERROR_SUGGESTIONS,
    SuggestionGenerator,
)
from formbridge_support.utils.error_handling import GenerationError
from formbridge_support.utils.logging_config import get_logger

logger = get_logger(__name__)

KNOWLEDGE_USED_LIMIT = 3

UNKNOWN_RESPONSES = (
    "I don't have specific information about that in my knowledge base. For questions "
    "about your own situation, I recommend contacting your caseworker or the Ontario Works "
    "office. Is there anything about this form I can help explain?",
    "That's a bit outside what I can confidently answer. I can help explain terms, "
    "clarify form sections, or guide you through the application. Would you like help "
    "with any of those?",
    "I'm not certain about that question. I'm best at explaining form terms and what each "
    "question is asking. For advice about your situation, please contact a caseworker.",
)

GENERIC_APOLOGY = (
    "I'm having some technical difficulties right now. Please try again in a moment, "
    "or contact Ontario Works directly for urgent questions."
)
HIGH_DEMAND_APOLOGY = (
    "I'm currently experiencing high demand. Please try again in a few moments."
)
CONFIGURATION_APOLOGY = (
    "There's a configuration issue with the AI service. Please contact support."
)
UNAVAILABLE_APOLOGY = (
    "The AI service is temporarily unavailable. Please try again later."
)

_APOLOGY_BY_CODE = {
    "ThrottlingException": HIGH_DEMAND_APOLOGY,
    "ServiceQuotaExceededException": HIGH_DEMAND_APOLOGY,
    "TooManyRequestsException": HIGH_DEMAND_APOLOGY,
    "AccessDeniedException": CONFIGURATION_APOLOGY,
    "UnrecognizedClientException": CONFIGURATION_APOLOGY,
    "ResourceNotFoundException": UNAVAILABLE_APOLOGY,
    "ModelNotReadyException": UNAVAILABLE_APOLOGY,
    "ServiceUnavailableException": UNAVAILABLE_APOLOGY,
}


def apology_for(error: Exception) -> str:
    """Pick a user-safe apology; internal error text is never included."""
    return _APOLOGY_BY_CODE.get(getattr(error, "code", ""), GENERIC_APOLOGY)


def unknown_response_for(query: str) -> str:
    """Deterministic pick from the canned pool so retries read the same."""
    index = zlib.crc32(normalize(query).encode("utf-8")) % len(UNKNOWN_RESPONSES)
    return UNKNOWN_RESPONSES[index]


class SupportChatService:
    """Sequence classification, prompt assembly, generation and suggestions."""

    def __init__(
        self,
        store: KnowledgeStore,
        generation_client: GenerationClient,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.search_service = SearchService(store)
        self.classifier = ConfidenceClassifier(self.search_service)
        self.prompt_assembler = PromptAssembler(
            self.search_service, history_window=self.settings.history_window
        )
        self.suggestion_generator = SuggestionGenerator(self.search_service)
        self.generation_client = generation_client

    def respond(
        self, request: SupportChatRequest, correlation_id: str = ""
    ) -> SupportChatResponse:
        """Always returns a well-formed response; errors become an apology."""
        try:
            confidence = self.classifier.classify(request.message)
            if confidence == Confidence.UNKNOWN:
                logger.info(
                    "No grounding found; skipping model call",
                    extra={"correlation_id": correlation_id},
                )
                return self._unknown_response(request)
            return self._grounded_response(request, confidence, correlation_id)
        except Exception as exc:
            logger.warning(
                "Support chat failed; returning apology",
                extra={
                    "correlation_id": correlation_id,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return SupportChatResponse(
                message=apology_for(exc),
                suggestions=list(ERROR_SUGGESTIONS),
                confidence=Confidence.UNKNOWN,
            )

    def _unknown_response(self, request: SupportChatRequest) -> SupportChatResponse:
        return SupportChatResponse(
            message=unknown_response_for(request.message),
            suggestions=self.suggestion_generator.suggest(request.message, request.page_path),
            confidence=Confidence.UNKNOWN,
        )

    def _grounded_response(
        self,
        request: SupportChatRequest,
        confidence: Confidence,
        correlation_id: str,
    ) -> SupportChatResponse:
        prompt = self.prompt_assembler.build_prompt(request)

        start = time.perf_counter()
        text = self.generation_client.generate(
            prompt,
            max_output_tokens=self.settings.max_output_tokens,
            temperature=self.settings.temperature,
        )
        if not isinstance(text, str) or not text.strip():
            raise GenerationError("Generation client returned no text", code="EmptyResponse")
        logger.info(
            "Generation complete",
            extra={
                "correlation_id": correlation_id,
                "confidence": confidence.value,
                "prompt_chars": len(prompt),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )

        knowledge_used = [
            result.id
            for result in self.search_service.search(request.message, KNOWLEDGE_USED_LIMIT)
        ]

        structured = None
        if is_selection_help_request(request.message, request.additional_context):
            structured = parse_structured_help(text)

        if structured is not None:
            return SupportChatResponse(
                message=render_structured_help(structured) or text,
                suggestions=structured.suggested_questions,
                knowledge_used=knowledge_used,
                confidence=confidence,
                structured=structured,
            )

        return SupportChatResponse(
            message=text,
            suggestions=self.suggestion_generator.suggest(request.message, request.page_path),
            knowledge_used=knowledge_used,
            confidence=confidence,
        )
