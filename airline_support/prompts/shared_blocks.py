"""
Shared prompt blocks injected into every agent prompt.
"""

RECOMMENDED_PROMPT_PREFIX = "You are a helpful AI assistant for an airline customer service system."

RETURN_TO_TRIAGE_BLOCK = (
    "If the customer asks a question that is not related to the routine, "
    "transfer back to the triage agent."
)


def known_or_unknown(value):
    return value or "[unknown]"
