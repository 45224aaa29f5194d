"""
Prompt assembly for the support chat model.

``build_prompt`` is a pure function of the request and the store snapshot:
no I/O, no clock, no randomness.
"""

from __future__ import annotations

from typing import List

from formbridge_support.models.chat import Role, SupportChatRequest
from formbridge_support.models.knowledge import KnowledgeEntry
from formbridge_support.services.search_service import SearchService
from formbridge_support.services.selection_help import (
    SELECTION_HELP_PROMPT,
    is_selection_help_request,
)

PROMPT_SEARCH_LIMIT = 3
MAX_KNOWLEDGE_ENTRIES = 5
DEFAULT_HISTORY_WINDOW = 6
DEFAULT_LANGUAGE = "en"

SUPPORT_SYSTEM_PROMPT = """You are a helpful assistant for FormBridge, a platform that helps people understand and complete government and legal forms.

YOUR ROLE:
- Explain forms, terminology and jargon in plain language.
- Guide users through filling out each section.
- Answer using the provided knowledge context first, then general knowledge.

TONE AND READING LEVEL:
- Friendly, patient and respectful. Many users are newcomers or have low literacy.
- Use short sentences and everyday words (about a Grade 6 reading level).

FORMATTING RULES:
1. Do not bold the greeting.
2. Use hyphens (-) for lists, never asterisks.
3. Bold only the term being defined (e.g., **Benefit Unit:** the people who ...).
4. Put a blank line between paragraphs and list items.

LIMITS:
- If you do not know, say so and suggest contacting a caseworker or a professional.
- Never invent eligibility amounts, deadlines or legal advice."""

LANGUAGE_NAMES = {
    "fr": "French (simple Canadian French)",
    "es": "Spanish",
    "pt": "Portuguese",
    "zh": "Chinese",
    "ar": "Arabic",
    "pa": "Punjabi",
    "tl": "Tagalog",
    "uk": "Ukrainian",
}


class PromptAssembler:
    """Build the bounded, ordered prompt sent to the generation model."""

    def __init__(
        self, search_service: SearchService, history_window: int = DEFAULT_HISTORY_WINDOW
    ) -> None:
        self.search_service = search_service
        self.history_window = history_window

    def build_prompt(self, request: SupportChatRequest) -> str:
        parts: List[str] = [SUPPORT_SYSTEM_PROMPT]

        if is_selection_help_request(request.message, request.additional_context):
            parts.append(f"\n{SELECTION_HELP_PROMPT}")

        language_line = self._language_directive(request.language)
        if language_line:
            parts.append(f"\n{language_line}")

        if request.page_path:
            parts.append(f"\n{self._location_line(request.page_path)}")

        knowledge_block = self._knowledge_block(self._knowledge_entries(request))
        if knowledge_block:
            parts.append(f"\n{knowledge_block}")

        if request.knowledge_context:
            parts.append(f"\nADDITIONAL CONTEXT:\n{request.knowledge_context}")
        if request.additional_context:
            parts.append(f"\nUSER-PROVIDED CONTEXT:\n{request.additional_context}")

        history = self._history_lines(request)
        if history:
            parts.append("\nCONVERSATION HISTORY:")
            parts.extend(history)

        parts.append(f"\nUser: {request.message}")
        parts.append("\nAssistant:")
        return "\n".join(parts)

    @staticmethod
    def _language_directive(language: str) -> str:
        if not language or language == DEFAULT_LANGUAGE:
            return ""
        name = LANGUAGE_NAMES.get(language, f"the language with code '{language}'")
        return f"LANGUAGE: Reply only in {name}, keeping the same plain-language style."

    def _location_line(self, page_path: str) -> str:
        page = self.search_service.store.page_entry(page_path)
        if page is None:
            return f"USER LOCATION: {page_path}"
        return f"USER LOCATION: {page_path} ({page.title} - {page.content})"

    def _knowledge_entries(self, request: SupportChatRequest) -> List[KnowledgeEntry]:
        """Search hits first, then entries linked from the current page, deduplicated."""
        entries = [
            result.entry
            for result in self.search_service.search(request.message, PROMPT_SEARCH_LIMIT)
        ]
        seen = {entry.id for entry in entries}
        for entry in self.search_service.store.page_knowledge(request.page_path):
            if entry.id not in seen:
                seen.add(entry.id)
                entries.append(entry)
        return entries[:MAX_KNOWLEDGE_ENTRIES]

    @staticmethod
    def _knowledge_block(entries: List[KnowledgeEntry]) -> str:
        if not entries:
            return ""
        lines = ["KNOWLEDGE BASE CONTEXT:"]
        for entry in entries:
            lines.append(f"\n[{entry.category.value.upper()}] {entry.title}:")
            lines.append(entry.content)
        return "\n".join(lines)

    def _history_lines(self, request: SupportChatRequest) -> List[str]:
        if self.history_window <= 0:
            return []
        recent = request.conversation_history[-self.history_window:]
        return [
            f"{'User' if turn.role == Role.USER else 'Assistant'}: {turn.content}"
            for turn in recent
        ]
