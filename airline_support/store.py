"""
In-memory conversation store.

Maps a conversation id to its persisted turn state. Pure key/value with no
eviction: entries live for the lifetime of the process, so memory grows with
the number of conversations (a bounded LRU or TTL would have to sit in front of
this store to cap it).

Turns for the same conversation are serialized through a per-id lock handed
out by ``lock``; different conversations never contend.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from airline_support.context import AirlineAgentContext


@dataclass
class ConversationState:
    conversation_id: str
    context: AirlineAgentContext
    current_agent_name: str
    input_items: list = field(default_factory=list)  # append-only HumanMessage / AIMessage history


class ConversationStore:
    def __init__(self):
        self._conversations: dict[str, ConversationState] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def get(self, conversation_id: Optional[str]) -> Optional[ConversationState]:
        if conversation_id is None:
            return None
        return self._conversations.get(conversation_id)

    def save(self, state: ConversationState) -> None:
        self._conversations[state.conversation_id] = state

    def __contains__(self, conversation_id: object) -> bool:
        return conversation_id in self._conversations

    def __len__(self) -> int:
        return len(self._conversations)

    @contextmanager
    def lock(self, conversation_id: str) -> Iterator[None]:
        """Hold the conversation's lock for the duration of one turn."""
        with self._guard:
            conversation_lock = self._locks.setdefault(conversation_id, threading.Lock())
        with conversation_lock:
            yield


conversation_store = ConversationStore()
