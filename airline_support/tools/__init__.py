# Tools package - Simulated airline backend
"""
Tool implementations for agent actions.
- Lookup tools: FAQ answers, flight status
- Context tools: seat update, seat map, cancellation
- Tool groups: tool identifiers declared by each agent
"""

from airline_support.tools.airline_tools import (
    cancel_flight,
    display_seat_map,
    faq_lookup_tool,
    flight_status_tool,
    update_seat,
)
from airline_support.tools.tool_groups import (
    cancellation_tools,
    faq_tools,
    flight_status_tools,
    seat_booking_tools,
    triage_tools,
)

__all__ = [
    # Lookup
    "faq_lookup_tool",
    "flight_status_tool",
    # Context
    "update_seat",
    "display_seat_map",
    "cancel_flight",
    # Tool groups
    "triage_tools",
    "faq_tools",
    "seat_booking_tools",
    "flight_status_tools",
    "cancellation_tools",
]
