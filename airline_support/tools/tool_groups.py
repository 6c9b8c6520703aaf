"""
Tool groupings — each agent only sees the tools it needs.
Identifiers are the names reported in tool_call events and agent descriptors.
"""

from airline_support.tools.airline_tools import faq_lookup_tool, flight_status_tool

UPDATE_SEAT = "update_seat"
DISPLAY_SEAT_MAP = "display_seat_map"
CANCEL_FLIGHT = "cancel_flight"
FAQ_LOOKUP = faq_lookup_tool.name
FLIGHT_STATUS = flight_status_tool.name

triage_tools: tuple[str, ...] = ()
faq_tools: tuple[str, ...] = (FAQ_LOOKUP,)
seat_booking_tools: tuple[str, ...] = (UPDATE_SEAT, DISPLAY_SEAT_MAP)
flight_status_tools: tuple[str, ...] = (FLIGHT_STATUS,)
cancellation_tools: tuple[str, ...] = (CANCEL_FLIGHT,)
