# Tracing package - Response records and structured logging
"""
Observability for the airline support engine.
- AgentEvent / GuardrailCheck / MessageResponse / AgentDescriptor: per-turn records
- setup_logging / get_logger: structlog configuration
"""

from airline_support.tracing.logging import get_logger, setup_logging
from airline_support.tracing.models import (
    AgentDescriptor,
    AgentEvent,
    GuardrailCheck,
    MessageResponse,
    create_agent_event,
    create_guardrail_check,
    create_tool_call_event,
)

__all__ = [
    "AgentDescriptor",
    "AgentEvent",
    "GuardrailCheck",
    "MessageResponse",
    "create_agent_event",
    "create_guardrail_check",
    "create_tool_call_event",
    "get_logger",
    "setup_logging",
]
