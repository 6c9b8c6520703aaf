"""
Shared airline context threaded through every turn of a conversation.

The context is a frozen pydantic model: hooks and tools never mutate it,
they return a copy built with ``with_changes``.
"""

from __future__ import annotations

import random
import string
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from airline_support.config import CONFIRMATION_NUMBER_LENGTH

_CONFIRMATION_ALPHABET = string.ascii_uppercase + string.digits


class AirlineAgentContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    passenger_name: Optional[str] = None
    confirmation_number: Optional[str] = None
    seat_number: Optional[str] = None
    flight_number: Optional[str] = None
    account_number: str

    def with_changes(self, **changes: Any) -> "AirlineAgentContext":
        """Return a new context with ``changes`` applied; account_number is kept."""
        if "account_number" in changes and changes["account_number"] != self.account_number:
            raise ValueError("account_number cannot change once the conversation has started")
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown context fields: {sorted(unknown)}")
        return self.model_copy(update=changes)

    def diff(self, other: "AirlineAgentContext") -> dict[str, Any]:
        """Fields whose value in ``other`` differs from this context."""
        before = self.model_dump()
        return {k: v for k, v in other.model_dump().items() if before.get(k) != v}


def generate_account_number() -> str:
    return str(random.randint(10_000_000, 99_999_999))


def generate_confirmation_number() -> str:
    return "".join(random.choice(_CONFIRMATION_ALPHABET) for _ in range(CONFIRMATION_NUMBER_LENGTH))


def generate_flight_number() -> str:
    return f"FLT-{random.randint(100, 999)}"


def create_initial_context() -> AirlineAgentContext:
    """Fresh context for a new conversation, with a fake 8-digit account number."""
    return AirlineAgentContext(account_number=generate_account_number())
