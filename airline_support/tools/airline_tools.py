"""
Simulated airline backend tools — FAQ, seat changes, flight status, seat map,
cancellation.

Lookup tools only take plain strings and are LangChain tools. Tools that read
or rewrite the shared context take it as their first argument and return new
values; the context itself is never mutated.
"""

from __future__ import annotations

from langchain_core.tools import tool

from airline_support.config import SEAT_MAP_SENTINEL
from airline_support.context import AirlineAgentContext
from airline_support.errors import RequiredFieldMissing

# Checked in order; first bucket with a matching keyword wins.
_FAQ_BUCKETS: list[tuple[tuple[str, ...], str]] = [
    (
        ("bag", "baggage"),
        "You are allowed to bring one bag on the plane. "
        "It must be under 50 pounds and 22 inches x 14 inches x 9 inches.",
    ),
    (
        ("seats", "plane"),
        "There are 120 seats on the plane. "
        "There are 22 business class seats and 98 economy seats. "
        "Exit rows are rows 4 and 16. "
        "Rows 5-8 are Economy Plus, with extra legroom.",
    ),
    (
        ("wifi",),
        "We have free wifi on the plane, join Airline-Wifi",
    ),
]

_FAQ_FALLBACK = "I'm sorry, I don't know the answer to that question."


@tool
def faq_lookup_tool(question: str) -> str:
    """Lookup frequently asked questions about baggage, seating and wifi."""
    q = (question or "").lower()
    for keywords, answer in _FAQ_BUCKETS:
        if any(keyword in q for keyword in keywords):
            return answer
    return _FAQ_FALLBACK


@tool
def flight_status_tool(flight_number: str) -> str:
    """Lookup status for a flight."""
    return f"Flight {flight_number} is on time and scheduled to depart at gate A10."


def update_seat(
    context: AirlineAgentContext,
    confirmation_number: str,
    new_seat: str,
) -> tuple[str, AirlineAgentContext]:
    """Update the seat for a given confirmation number.

    Returns the confirmation message and the updated context.
    """
    if context.flight_number is None:
        raise RequiredFieldMissing("flight_number")
    new_context = context.with_changes(confirmation_number=confirmation_number, seat_number=new_seat)
    return f"Updated seat to {new_seat} for confirmation number {confirmation_number}", new_context


def display_seat_map(context: AirlineAgentContext) -> str:
    """Ask the UI to show an interactive seat map."""
    return SEAT_MAP_SENTINEL


def cancel_flight(context: AirlineAgentContext) -> str:
    """Cancel the flight in the context."""
    if context.flight_number is None:
        raise RequiredFieldMissing("flight_number")
    return f"Flight {context.flight_number} successfully cancelled"
