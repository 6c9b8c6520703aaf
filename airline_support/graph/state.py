"""
State definitions for the turn graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from typing_extensions import TypedDict

from airline_support.context import AirlineAgentContext
from airline_support.patterns.guardrails import GuardrailOutput
from airline_support.tracing.models import AgentEvent, MessageResponse


class TurnState(TypedDict, total=False):
    """State shared by every node of one turn."""

    # ── Input ────────────────────────────────────────────────────────────────
    agent_name: str
    input_items: list  # HumanMessage / AIMessage history, latest user message last
    context: AirlineAgentContext

    # ── Guardrails ───────────────────────────────────────────────────────────
    user_message: Optional[str]  # raw text of the latest user message
    guardrail_results: list[tuple[str, GuardrailOutput]]

    # ── Agent output ─────────────────────────────────────────────────────────
    messages: list[MessageResponse]
    events: list[AgentEvent]
    next_agent: str
    next_context: AirlineAgentContext


@dataclass
class TurnResult:
    """Outcome of one successfully processed turn."""

    messages: list[MessageResponse]
    events: list[AgentEvent]
    current_agent: str
    context: AirlineAgentContext
    guardrail_results: list[tuple[str, GuardrailOutput]] = field(default_factory=list)
