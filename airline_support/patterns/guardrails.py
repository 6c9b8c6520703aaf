"""
Input guardrails.
Covers: topic relevance (airline travel + small talk) and jailbreak / prompt
injection detection.

Both checks are keyword based: case-insensitive substring match on the raw
user utterance only, never on the conversation history.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

RELEVANCE_GUARDRAIL = "relevance_guardrail"
JAILBREAK_GUARDRAIL = "jailbreak_guardrail"


@dataclass(frozen=True)
class GuardrailOutput:
    reasoning: str
    passed: bool


# ═════════════════════════════════════════════════════════════════════════════
# 1) RELEVANCE
# ═════════════════════════════════════════════════════════════════════════════

_CONVERSATIONAL_KEYWORDS: list[str] = [
    "hi",
    "hello",
    "ok",
    "yes",
    "no",
    "thanks",
    "thank you",
]

_AIRLINE_KEYWORDS: list[str] = [
    "flight",
    "baggage",
    "seat",
    "booking",
    "cancel",
    "status",
    "check-in",
    "wifi",
    "plane",
]


def relevance_guardrail(input_text: str) -> GuardrailOutput:
    """Pass small talk and airline topics, reject everything else."""
    text_lower = (input_text or "").lower()

    # Small talk wins even without any airline term
    if any(keyword in text_lower for keyword in _CONVERSATIONAL_KEYWORDS):
        return GuardrailOutput(reasoning="Conversational message is acceptable", passed=True)

    is_relevant = any(keyword in text_lower for keyword in _AIRLINE_KEYWORDS)
    return GuardrailOutput(
        reasoning=(
            "Message is related to airline travel"
            if is_relevant
            else "Message is not related to airline travel"
        ),
        passed=is_relevant,
    )


# ═════════════════════════════════════════════════════════════════════════════
# 2) JAILBREAK
# ═════════════════════════════════════════════════════════════════════════════

_JAILBREAK_PATTERNS: list[str] = [
    "system prompt",
    "ignore instructions",
    "drop table",
    "sql injection",
    "reveal prompt",
    "what is your prompt",
    "bypass",
    "override",
]


def jailbreak_guardrail(input_text: str) -> GuardrailOutput:
    """Flag prompt-injection and attack phrases."""
    text_lower = (input_text or "").lower()
    is_safe = not any(pattern in text_lower for pattern in _JAILBREAK_PATTERNS)
    return GuardrailOutput(
        reasoning="Input appears safe" if is_safe else "Potential jailbreak attempt detected",
        passed=is_safe,
    )


# ═════════════════════════════════════════════════════════════════════════════
# 3) REGISTRY
# ═════════════════════════════════════════════════════════════════════════════

_GUARDRAILS: dict[str, Callable[[str], GuardrailOutput]] = {
    RELEVANCE_GUARDRAIL: relevance_guardrail,
    JAILBREAK_GUARDRAIL: jailbreak_guardrail,
}

_GUARDRAIL_NAMES: dict[str, str] = {
    RELEVANCE_GUARDRAIL: "Relevance Guardrail",
    JAILBREAK_GUARDRAIL: "Jailbreak Guardrail",
}


def evaluate_guardrail(guardrail_id: str, text: str) -> GuardrailOutput:
    """Run one guardrail by id. Unknown ids raise KeyError."""
    return _GUARDRAILS[guardrail_id](text)


def get_guardrail_name(guardrail_id: str) -> str:
    """Human-readable name, e.g. ``relevance_guardrail`` -> ``Relevance Guardrail``."""
    if guardrail_id in _GUARDRAIL_NAMES:
        return _GUARDRAIL_NAMES[guardrail_id]
    return " ".join(part.capitalize() for part in guardrail_id.split("_"))
