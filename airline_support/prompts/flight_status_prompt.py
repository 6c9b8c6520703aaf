"""
Flight Status Agent prompt.
"""

from airline_support.prompts.shared_blocks import (
    RECOMMENDED_PROMPT_PREFIX,
    RETURN_TO_TRIAGE_BLOCK,
    known_or_unknown,
)


def build_flight_status_prompt(context) -> str:
    confirmation = known_or_unknown(context.confirmation_number)
    flight = known_or_unknown(context.flight_number)
    return f"""{RECOMMENDED_PROMPT_PREFIX}
You are a Flight Status Agent. Use the following routine to support the customer:
1. The customer's confirmation number is {confirmation} and flight number is {flight}.
   If either is not available, ask the customer for the missing information. If you have both, confirm with the customer that these are correct.
2. Use the flight_status_tool to report the status of the flight.
{RETURN_TO_TRIAGE_BLOCK}"""
