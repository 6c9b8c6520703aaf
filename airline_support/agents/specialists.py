"""
Per-agent transition functions.

Each node reads the latest user message and the shared context from the turn
state and returns the agent's messages, events, the next active agent and the
next context. Keyword tests run in a fixed priority order per agent.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from airline_support.agents.registry import AgentName
from airline_support.config import DEFAULT_CONFIRMATION_NUMBER, DEFAULT_FLIGHT_NUMBER
from airline_support.context import AirlineAgentContext
from airline_support.patterns.handoff import perform_handoff
from airline_support.tools.airline_tools import (
    cancel_flight,
    display_seat_map,
    faq_lookup_tool,
    flight_status_tool,
    update_seat,
)
from airline_support.tools.tool_groups import CANCEL_FLIGHT, DISPLAY_SEAT_MAP, UPDATE_SEAT
from airline_support.tracing.logging import get_logger
from airline_support.tracing.models import (
    AgentEvent,
    MessageResponse,
    create_tool_call_event,
)

logger = get_logger(__name__)

_SEAT_RE = re.compile(r"seat (\w+)", re.IGNORECASE)

SEAT_BOOKING_TRANSFER = (
    "I'll help you with seat booking. Let me transfer you to our seat booking specialist."
)
FLIGHT_STATUS_TRANSFER = (
    "I'll help you check your flight status. Let me get that information for you."
)
CANCELLATION_TRANSFER = "I understand you want to cancel your flight. Let me help you with that."
FAQ_TRANSFER = "Let me look that up for you."
TRIAGE_GREETING = (
    "Hello! I'm here to help you with your airline needs. I can assist with flight status, "
    "seat booking, cancellations, and answer frequently asked questions. How can I help you today?"
)
SEAT_BOOKING_PROMPT = (
    "I can help you select or change your seat. Would you like me to show you the seat map, "
    "or do you have a specific seat preference?"
)


# ─── Helpers ────────────────────────────────────────────────────────────────

def _mentions(text: str, *keywords: str) -> bool:
    return any(keyword in text for keyword in keywords)


def _user_text(state: dict) -> str:
    return (state.get("user_message") or "").lower()


def _step(
    agent: AgentName,
    context: AirlineAgentContext,
    messages: Optional[list[MessageResponse]] = None,
    events: Optional[list[AgentEvent]] = None,
) -> dict:
    return {
        "messages": messages or [],
        "events": events or [],
        "next_agent": agent.value,
        "next_context": context,
    }


def _say(agent: AgentName, content: str) -> MessageResponse:
    return MessageResponse(content=content, agent=agent.value)


def _tool_event(agent: AgentName, tool_name: str, tool_args: Optional[dict] = None) -> AgentEvent:
    logger.info("tool_call", agent=agent.value, tool=tool_name)
    return create_tool_call_event(agent.value, tool_name, tool_args)


def _faq_answer(question: str) -> tuple[AgentEvent, MessageResponse]:
    event = _tool_event(AgentName.FAQ, faq_lookup_tool.name, {"question": question})
    answer = faq_lookup_tool.invoke({"question": question})
    return event, _say(AgentName.FAQ, answer)


def _handoff(state: dict, target: AgentName, transition_message: str) -> dict:
    context, event, message = perform_handoff(
        AgentName.TRIAGE, target, state["context"], transition_message
    )
    return _step(target, context, [message], [event])


# ─── Triage ──────────────────────────────────────────────────────────────────

def triage_agent_node(state: dict) -> dict:
    """Route to a specialist, or greet with the menu of what we can do."""
    text = _user_text(state)

    if _mentions(text, "seat", "booking"):
        return _handoff(state, AgentName.SEAT_BOOKING, SEAT_BOOKING_TRANSFER)
    if _mentions(text, "status", "flight"):
        return _handoff(state, AgentName.FLIGHT_STATUS, FLIGHT_STATUS_TRANSFER)
    if _mentions(text, "cancel"):
        return _handoff(state, AgentName.CANCELLATION, CANCELLATION_TRANSFER)
    if _mentions(text, "bag", "wifi", "faq"):
        # Triage answers the first FAQ itself; the lookup is attributed to the FAQ agent
        step = _handoff(state, AgentName.FAQ, FAQ_TRANSFER)
        event, answer = _faq_answer(text)
        step["events"].append(event)
        step["messages"].append(answer)
        return step

    return _step(AgentName.TRIAGE, state["context"], [_say(AgentName.TRIAGE, TRIAGE_GREETING)])


# ─── Seat Booking ────────────────────────────────────────────────────────────

def seat_booking_agent_node(state: dict) -> dict:
    agent = AgentName.SEAT_BOOKING
    text = _user_text(state)
    context: AirlineAgentContext = state["context"]

    if _mentions(text, "seat map", "show seats"):
        event = _tool_event(agent, DISPLAY_SEAT_MAP)
        return _step(agent, context, [_say(agent, display_seat_map(context))], [event])

    match = _SEAT_RE.search(text)
    if match:
        new_seat = match.group(1).upper()
        confirmation = context.confirmation_number or DEFAULT_CONFIRMATION_NUMBER
        event = _tool_event(
            agent, UPDATE_SEAT, {"confirmation_number": confirmation, "new_seat": new_seat}
        )
        result, new_context = update_seat(context, confirmation, new_seat)
        return _step(agent, new_context, [_say(agent, result)], [event])

    return _step(agent, context, [_say(agent, SEAT_BOOKING_PROMPT)])


# ─── Flight Status ───────────────────────────────────────────────────────────

def flight_status_agent_node(state: dict) -> dict:
    agent = AgentName.FLIGHT_STATUS
    context: AirlineAgentContext = state["context"]
    flight_number = context.flight_number or DEFAULT_FLIGHT_NUMBER

    event = _tool_event(agent, flight_status_tool.name, {"flight_number": flight_number})
    result = flight_status_tool.invoke({"flight_number": flight_number})
    return _step(agent, context, [_say(agent, result)], [event])


# ─── Cancellation ────────────────────────────────────────────────────────────

def cancellation_agent_node(state: dict) -> dict:
    agent = AgentName.CANCELLATION
    text = _user_text(state)
    context: AirlineAgentContext = state["context"]

    if _mentions(text, "yes", "confirm"):
        event = _tool_event(agent, CANCEL_FLIGHT)
        return _step(agent, context, [_say(agent, cancel_flight(context))], [event])

    prompt = (
        f"I can help you cancel your flight {context.flight_number or '[unknown]'} "
        f"with confirmation number {context.confirmation_number or '[unknown]'}. "
        "Are you sure you want to proceed with the cancellation?"
    )
    return _step(agent, context, [_say(agent, prompt)])


# ─── FAQ ─────────────────────────────────────────────────────────────────────

def faq_agent_node(state: dict) -> dict:
    event, answer = _faq_answer(_user_text(state))
    return _step(AgentName.FAQ, state["context"], [answer], [event])


AGENT_NODES: dict[AgentName, Callable[[dict], dict]] = {
    AgentName.TRIAGE: triage_agent_node,
    AgentName.FAQ: faq_agent_node,
    AgentName.SEAT_BOOKING: seat_booking_agent_node,
    AgentName.FLIGHT_STATUS: flight_status_agent_node,
    AgentName.CANCELLATION: cancellation_agent_node,
}
