"""
Response records built during a turn.
Events, guardrail checks and agent descriptors are ephemeral: produced per
turn and returned to the client, never persisted.
"""

from __future__ import annotations

import time
import uuid
from typing import Any, Literal

from pydantic import BaseModel, Field

EventType = Literal["handoff", "tool_call", "context_update"]


def _now_ms() -> float:
    return time.time() * 1000


def _new_id() -> str:
    return uuid.uuid4().hex


class MessageResponse(BaseModel):
    content: str
    agent: str


class AgentEvent(BaseModel):
    id: str = Field(default_factory=_new_id)
    type: EventType
    agent: str
    content: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
    timestamp: float = Field(default_factory=_now_ms)


class GuardrailCheck(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    input: str
    reasoning: str = ""
    passed: bool
    timestamp: float = Field(default_factory=_now_ms)


class AgentDescriptor(BaseModel):
    name: str
    description: str
    handoffs: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    input_guardrails: list[str] = Field(default_factory=list)


def create_agent_event(
    event_type: EventType,
    agent: str,
    content: str = "",
    metadata: dict[str, Any] | None = None,
) -> AgentEvent:
    return AgentEvent(type=event_type, agent=agent, content=content, metadata=metadata or {})


def create_tool_call_event(agent: str, tool_name: str, tool_args: dict[str, Any] | None = None) -> AgentEvent:
    """tool_call event; ``tool_args`` is recorded only when the tool takes arguments."""
    metadata = {"tool_args": tool_args} if tool_args else {}
    return create_agent_event("tool_call", agent, tool_name, metadata)


def create_guardrail_check(name: str, input_text: str, reasoning: str, passed: bool) -> GuardrailCheck:
    return GuardrailCheck(name=name, input=input_text, reasoning=reasoning, passed=passed)
