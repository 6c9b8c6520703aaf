"""
Errors raised by the turn pipeline.
"""

from __future__ import annotations

from typing import Any


class GuardrailRejected(Exception):
    """A required input guardrail rejected the latest user message.

    Expected and user-facing: the request handler turns it into a refusal
    response instead of failing the turn.
    """

    def __init__(self, message: str, guardrail: str, output: Any):
        super().__init__(message)
        self.guardrail = guardrail
        self.output = output

    @property
    def reasoning(self) -> str:
        return getattr(self.output, "reasoning", "")


class RequiredFieldMissing(Exception):
    """A tool was invoked on a context lacking a prerequisite field."""

    def __init__(self, field: str):
        super().__init__(f"{field.replace('_', ' ').capitalize()} is required")
        self.field = field
