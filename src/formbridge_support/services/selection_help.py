"""
Selected-text help mode.

When the user highlights form text and asks for help, the model is asked for a
fixed INTERPRETATION / BREAKDOWN / SUGGESTED_QUESTIONS layout which is parsed
back into a StructuredHelp.
"""

from __future__ import annotations

import re
from typing import Optional

from formbridge_support.models.chat import StructuredHelp

SELECTION_HELP_PROMPT = """WHEN THE USER ASKS ABOUT SELECTED/HIGHLIGHTED TEXT FROM A FORM:
You MUST respond using this EXACT structure with these markers:

INTERPRETATION: [One clear sentence explaining what this text is asking in plain, everyday language]

BREAKDOWN:
- [First key point about what to consider or include]
- [Second key point about what to exclude or watch out for]
- [Third key point if relevant, otherwise omit this line]

SUGGESTED_QUESTIONS:
- What does this mean?
- Who should I include?
- What if I'm not sure?

RULES:
- The INTERPRETATION line must be ONE sentence that turns jargon into simple words.
- BREAKDOWN has 2-4 bullet points, each starting with a hyphen.
- SUGGESTED_QUESTIONS has exactly 3 questions, each on its own line with a hyphen.
- Keep the whole response under 200 words and add nothing after SUGGESTED_QUESTIONS."""

DEFAULT_SELECTION_QUESTIONS = (
    "What does this mean?",
    "Who should I include?",
    "What if I'm not sure?",
)

_TRIGGERS = ("help me understand this text", "help understanding")

_INTERPRETATION_RE = re.compile(r"INTERPRETATION:\s*(.+?)(?=\n|BREAKDOWN:)", re.I | re.S)
_BREAKDOWN_RE = re.compile(r"BREAKDOWN:\s*(.+?)(?=SUGGESTED_QUESTIONS:)", re.I | re.S)
_QUESTIONS_RE = re.compile(r"SUGGESTED_QUESTIONS:\s*(.+)$", re.I | re.S)
_BULLET_RE = re.compile(r"^[-*]\s*")


def is_selection_help_request(message: str, additional_context: Optional[str] = None) -> bool:
    lowered = (message or "").lower()
    if any(trigger in lowered for trigger in _TRIGGERS):
        return True
    return "selected text" in (additional_context or "").lower()


def _bullets(block: str) -> list:
    lines = (_BULLET_RE.sub("", line).strip() for line in block.splitlines())
    return [line for line in lines if line]


def parse_structured_help(text: str) -> Optional[StructuredHelp]:
    """Parse a structured reply; None when any marker is missing."""
    if not all(marker in text for marker in ("INTERPRETATION:", "BREAKDOWN:", "SUGGESTED_QUESTIONS:")):
        return None

    interpretation = _INTERPRETATION_RE.search(text)
    breakdown = _BREAKDOWN_RE.search(text)
    questions = _QUESTIONS_RE.search(text)

    suggested = [
        q for q in _bullets(questions.group(1) if questions else "") if q.endswith("?")
    ][:3]
    for default in DEFAULT_SELECTION_QUESTIONS:
        if len(suggested) >= 3:
            break
        if default not in suggested:
            suggested.append(default)

    return StructuredHelp(
        interpretation=interpretation.group(1).strip() if interpretation else "",
        breakdown=_bullets(breakdown.group(1) if breakdown else ""),
        suggested_questions=suggested,
    )


def render_structured_help(structured: StructuredHelp) -> str:
    """Display text: the interpretation followed by the bulleted breakdown."""
    bullets = "\n".join(f"- {point}" for point in structured.breakdown)
    return f"{structured.interpretation}\n\n{bullets}".strip()
