"""
Tests for the simulated airline backend tools.
"""

import pytest

from airline_support.config import SEAT_MAP_SENTINEL
from airline_support.context import AirlineAgentContext
from airline_support.errors import RequiredFieldMissing
from airline_support.tools import (
    cancel_flight,
    display_seat_map,
    faq_lookup_tool,
    flight_status_tool,
    update_seat,
)


def _faq(question: str) -> str:
    return faq_lookup_tool.invoke({"question": question})


class TestFaqLookup:
    def test_baggage(self):
        assert "one bag" in _faq("How many bags can I bring?")

    def test_seats(self):
        assert "120 seats" in _faq("How many seats are there?")

    def test_wifi(self):
        assert _faq("Is there WIFI?") == "We have free wifi on the plane, join Airline-Wifi"

    def test_baggage_wins_over_plane(self):
        assert "one bag" in _faq("can I take my bag on the plane")

    def test_plane_wins_over_wifi(self):
        assert "120 seats" in _faq("does the plane have wifi")

    def test_unknown_question(self):
        assert _faq("what is for dinner?") == "I'm sorry, I don't know the answer to that question."


class TestFlightStatus:
    def test_status_mentions_flight(self):
        result = flight_status_tool.invoke({"flight_number": "FLT-456"})
        assert result == "Flight FLT-456 is on time and scheduled to depart at gate A10."


class TestUpdateSeat:
    def test_requires_flight_number(self):
        context = AirlineAgentContext(account_number="12345678")
        with pytest.raises(RequiredFieldMissing) as err:
            update_seat(context, "ABC123", "12A")
        assert err.value.field == "flight_number"

    def test_updates_seat_and_confirmation(self):
        context = AirlineAgentContext(
            account_number="12345678",
            passenger_name="Ada Lovelace",
            flight_number="FLT-456",
            confirmation_number="OLD999",
            seat_number="1A",
        )
        message, new_context = update_seat(context, "XYZ789", "14C")

        assert message == "Updated seat to 14C for confirmation number XYZ789"
        assert new_context.seat_number == "14C"
        assert new_context.confirmation_number == "XYZ789"
        assert new_context.passenger_name == "Ada Lovelace"
        assert new_context.flight_number == "FLT-456"
        assert new_context.account_number == "12345678"
        # original value untouched
        assert context.seat_number == "1A"


class TestCancelFlight:
    def test_requires_flight_number(self):
        with pytest.raises(RequiredFieldMissing):
            cancel_flight(AirlineAgentContext(account_number="12345678"))

    def test_cancels(self):
        context = AirlineAgentContext(account_number="12345678", flight_number="FLT-321")
        assert cancel_flight(context) == "Flight FLT-321 successfully cancelled"


def test_display_seat_map_returns_sentinel():
    assert display_seat_map(AirlineAgentContext(account_number="12345678")) == SEAT_MAP_SENTINEL
