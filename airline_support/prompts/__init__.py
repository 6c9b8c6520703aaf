# Prompts package - Agent instruction templates
"""
Instruction templates for all agents.
Every builder is a function of the shared context returning a string; they are
descriptive metadata only and never drive the keyword routing.
"""

from airline_support.prompts.cancellation_prompt import build_cancellation_prompt
from airline_support.prompts.faq_prompt import build_faq_prompt
from airline_support.prompts.flight_status_prompt import build_flight_status_prompt
from airline_support.prompts.seat_booking_prompt import build_seat_booking_prompt
from airline_support.prompts.shared_blocks import RECOMMENDED_PROMPT_PREFIX
from airline_support.prompts.triage_prompt import build_triage_prompt

__all__ = [
    "build_cancellation_prompt",
    "build_faq_prompt",
    "build_flight_status_prompt",
    "build_seat_booking_prompt",
    "build_triage_prompt",
    "RECOMMENDED_PROMPT_PREFIX",
]
