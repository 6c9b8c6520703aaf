"""
Handoff hooks and handoff bookkeeping.

Hooks enrich the shared context before control moves to the target agent:
- Seat Booking always issues a new booking reference (regenerates both ids).
- Cancellation works on the existing booking when one is known and only
  fills the missing ids.
Flight Status and FAQ take over without a hook.
"""

from __future__ import annotations

from typing import Callable

from airline_support.agents.registry import AgentName, get_agent
from airline_support.context import (
    AirlineAgentContext,
    generate_confirmation_number,
    generate_flight_number,
)
from airline_support.tracing.logging import get_logger
from airline_support.tracing.models import AgentEvent, MessageResponse, create_agent_event

logger = get_logger(__name__)

HandoffHook = Callable[[AirlineAgentContext], AirlineAgentContext]


def on_seat_booking_handoff(context: AirlineAgentContext) -> AirlineAgentContext:
    return context.with_changes(
        confirmation_number=generate_confirmation_number(),
        flight_number=generate_flight_number(),
    )


def on_cancellation_handoff(context: AirlineAgentContext) -> AirlineAgentContext:
    return context.with_changes(
        confirmation_number=context.confirmation_number or generate_confirmation_number(),
        flight_number=context.flight_number or generate_flight_number(),
    )


HANDOFF_HOOKS: dict[AgentName, HandoffHook] = {
    AgentName.SEAT_BOOKING: on_seat_booking_handoff,
    AgentName.CANCELLATION: on_cancellation_handoff,
}


def perform_handoff(
    source: AgentName,
    target: AgentName,
    context: AirlineAgentContext,
    transition_message: str,
) -> tuple[AirlineAgentContext, AgentEvent, MessageResponse]:
    """Run the target's hook and build the handoff event + transitional message.

    Only edges declared in the registry are allowed. The transitional message
    is spoken by the source agent.
    """
    if target.value not in get_agent(source).handoffs:
        raise ValueError(f"{source.value} cannot hand off to {target.value}")

    hook = HANDOFF_HOOKS.get(target)
    new_context = hook(context) if hook is not None else context
    event = create_agent_event(
        "handoff",
        source.value,
        f"{source.value} -> {target.value}",
        {"source_agent": source.value, "target_agent": target.value},
    )
    logger.info("handoff", source_agent=source.value, target_agent=target.value)
    return new_context, event, MessageResponse(content=transition_message, agent=source.value)
