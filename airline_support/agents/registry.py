"""
Agent registry — the five routing modes and the handoff graph between them.

Built once at import and read-only afterwards: handoff edges are stored as
agent names and resolved through ``get_agent`` at dispatch time, so no agent
holds a reference to another.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from airline_support.context import AirlineAgentContext
from airline_support.patterns.guardrails import (
    JAILBREAK_GUARDRAIL,
    RELEVANCE_GUARDRAIL,
    get_guardrail_name,
)
from airline_support.prompts import (
    build_cancellation_prompt,
    build_faq_prompt,
    build_flight_status_prompt,
    build_seat_booking_prompt,
    build_triage_prompt,
)
from airline_support.tools.tool_groups import (
    cancellation_tools,
    faq_tools,
    flight_status_tools,
    seat_booking_tools,
    triage_tools,
)
from airline_support.tracing.models import AgentDescriptor


class AgentName(str, Enum):
    TRIAGE = "Triage Agent"
    FAQ = "FAQ Agent"
    SEAT_BOOKING = "Seat Booking Agent"
    FLIGHT_STATUS = "Flight Status Agent"
    CANCELLATION = "Cancellation Agent"


@dataclass(frozen=True)
class Agent:
    name: str
    handoff_description: str
    instructions: Callable[[AirlineAgentContext], str]
    tools: tuple[str, ...] = ()
    handoffs: tuple[str, ...] = ()
    input_guardrails: tuple[str, ...] = ()

    @property
    def identity(self) -> AgentName:
        return AgentName(self.name)

    def get_instructions(self, context: AirlineAgentContext) -> str:
        return self.instructions(context)


_DEFAULT_GUARDRAILS = (RELEVANCE_GUARDRAIL, JAILBREAK_GUARDRAIL)
_BACK_TO_TRIAGE = (AgentName.TRIAGE.value,)


def _build_registry() -> Mapping[AgentName, Agent]:
    agents = [
        Agent(
            name=AgentName.TRIAGE.value,
            handoff_description=(
                "A triage agent that can delegate a customer's request to the appropriate agent."
            ),
            instructions=build_triage_prompt,
            tools=triage_tools,
            handoffs=(
                AgentName.FLIGHT_STATUS.value,
                AgentName.CANCELLATION.value,
                AgentName.FAQ.value,
                AgentName.SEAT_BOOKING.value,
            ),
            input_guardrails=_DEFAULT_GUARDRAILS,
        ),
        Agent(
            name=AgentName.FAQ.value,
            handoff_description="A helpful agent that can answer questions about the airline.",
            instructions=build_faq_prompt,
            tools=faq_tools,
            handoffs=_BACK_TO_TRIAGE,
            input_guardrails=_DEFAULT_GUARDRAILS,
        ),
        Agent(
            name=AgentName.SEAT_BOOKING.value,
            handoff_description="A helpful agent that can update a seat on a flight.",
            instructions=build_seat_booking_prompt,
            tools=seat_booking_tools,
            handoffs=_BACK_TO_TRIAGE,
            input_guardrails=_DEFAULT_GUARDRAILS,
        ),
        Agent(
            name=AgentName.FLIGHT_STATUS.value,
            handoff_description="An agent to provide flight status information.",
            instructions=build_flight_status_prompt,
            tools=flight_status_tools,
            handoffs=_BACK_TO_TRIAGE,
            input_guardrails=_DEFAULT_GUARDRAILS,
        ),
        Agent(
            name=AgentName.CANCELLATION.value,
            handoff_description="An agent to cancel flights.",
            instructions=build_cancellation_prompt,
            tools=cancellation_tools,
            handoffs=_BACK_TO_TRIAGE,
            input_guardrails=_DEFAULT_GUARDRAILS,
        ),
    ]
    return MappingProxyType({agent.identity: agent for agent in agents})


AGENTS: Mapping[AgentName, Agent] = _build_registry()


def get_agent(name: AgentName | str) -> Agent:
    """Look up an agent by identity or display name. Raises KeyError if unknown."""
    return AGENTS[AgentName(name)]


def get_agent_by_name(name: str | None) -> Agent:
    """Look up an agent by display name, falling back to Triage for unknown names."""
    try:
        return get_agent(name)
    except (KeyError, ValueError):
        return AGENTS[AgentName.TRIAGE]


def build_agents_list() -> list[AgentDescriptor]:
    """Snapshot of the registry sent with every response."""
    return [
        AgentDescriptor(
            name=agent.name,
            description=agent.handoff_description,
            handoffs=list(agent.handoffs),
            tools=list(agent.tools),
            input_guardrails=[get_guardrail_name(g) for g in agent.input_guardrails],
        )
        for agent in AGENTS.values()
    ]
