# Patterns package - Guardrails and handoff hooks
"""
Agent patterns for the airline support engine.
- Guardrails: relevance and jailbreak checks on the latest user message
- Handoff: context-enriching hooks run when control moves between agents

Note: handoff hooks live in airline_support.patterns.handoff (imports the agent registry)
"""

from airline_support.patterns.guardrails import (
    JAILBREAK_GUARDRAIL,
    RELEVANCE_GUARDRAIL,
    GuardrailOutput,
    evaluate_guardrail,
    get_guardrail_name,
    jailbreak_guardrail,
    relevance_guardrail,
)

__all__ = [
    "JAILBREAK_GUARDRAIL",
    "RELEVANCE_GUARDRAIL",
    "GuardrailOutput",
    "evaluate_guardrail",
    "get_guardrail_name",
    "jailbreak_guardrail",
    "relevance_guardrail",
]
