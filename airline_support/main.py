"""
FastAPI application — airline customer service agents.

Endpoints:
  POST /chat    → Send a message (starts a conversation when no known id is given)
  GET  /health  → Health check
"""

from __future__ import annotations

import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from langchain_core.messages import AIMessage, HumanMessage
from pydantic import BaseModel

from airline_support import config
from airline_support.agents.registry import Agent, AgentName, build_agents_list, get_agent_by_name
from airline_support.context import AirlineAgentContext, create_initial_context
from airline_support.errors import GuardrailRejected
from airline_support.graph.graph_builder import compile_graph, process_turn
from airline_support.patterns.guardrails import get_guardrail_name
from airline_support.store import ConversationState, ConversationStore, conversation_store
from airline_support.tracing.logging import get_logger, setup_logging
from airline_support.tracing.models import (
    AgentDescriptor,
    AgentEvent,
    GuardrailCheck,
    MessageResponse,
    create_guardrail_check,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and compile the turn graph before serving."""
    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT, config.SERVICE_NAME)
    compile_graph()
    logger.info("startup", cors_origins=config.CORS_ORIGINS)
    yield
    logger.info("shutdown", conversations=len(conversation_store))


app = FastAPI(
    title="Airline Customer Service Agents",
    description="Simulated multi-agent airline support with handoffs and input guardrails",
    version="1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Models ───────────────────────────────────────────────────────────────────

class ChatRequest(BaseModel):
    message: str
    conversation_id: Optional[str] = None


class ChatResponse(BaseModel):
    conversation_id: str
    current_agent: str
    messages: list[MessageResponse] = []
    events: list[AgentEvent] = []
    context: AirlineAgentContext
    agents: list[AgentDescriptor] = []
    guardrails: list[GuardrailCheck] = []


# ── Request handling ─────────────────────────────────────────────────────────

def _build_response(
    state: ConversationState,
    messages: Optional[list[MessageResponse]] = None,
    events: Optional[list[AgentEvent]] = None,
    guardrails: Optional[list[GuardrailCheck]] = None,
) -> ChatResponse:
    return ChatResponse(
        conversation_id=state.conversation_id,
        current_agent=state.current_agent_name,
        messages=messages or [],
        events=events or [],
        context=state.context,
        agents=build_agents_list(),
        guardrails=guardrails or [],
    )


def _refuse(
    state: ConversationState,
    agent: Agent,
    input_items: list,
    message: str,
    exc: GuardrailRejected,
    store: ConversationStore,
) -> ChatResponse:
    """Answer with the fixed refusal; context and active agent stay as they were."""
    checks = [
        create_guardrail_check(
            get_guardrail_name(guardrail),
            message,
            exc.reasoning if guardrail == exc.guardrail else "",
            guardrail != exc.guardrail,
        )
        for guardrail in agent.input_guardrails
    ]
    input_items.append(AIMessage(content=config.REFUSAL_MESSAGE))
    state.input_items = input_items
    state.current_agent_name = agent.name
    store.save(state)

    logger.info("turn_refused", agent=agent.name, guardrail=exc.guardrail)
    refusal = MessageResponse(content=config.REFUSAL_MESSAGE, agent=agent.name)
    return _build_response(state, [refusal], [], checks)


def _run_turn(state: ConversationState, message: str, store: ConversationStore) -> ChatResponse:
    agent = get_agent_by_name(state.current_agent_name)
    # Committed to the store only once the turn has produced a response
    input_items = [*state.input_items, HumanMessage(content=message)]

    try:
        result = process_turn(agent, input_items, state.context)
    except GuardrailRejected as exc:
        return _refuse(state, agent, input_items, message, exc, store)

    for msg in result.messages:
        input_items.append(AIMessage(content=msg.content))
    state.input_items = input_items
    state.context = result.context
    state.current_agent_name = result.current_agent
    store.save(state)

    guardrails = [
        create_guardrail_check(get_guardrail_name(guardrail), message, output.reasoning, True)
        for guardrail, output in result.guardrail_results
    ]
    logger.info(
        "turn_completed",
        agent=agent.name,
        next_agent=result.current_agent,
        events=[e.type for e in result.events],
    )
    return _build_response(state, result.messages, result.events, guardrails)


def handle_chat(req: ChatRequest, store: Optional[ConversationStore] = None) -> ChatResponse:
    """Look up or create the conversation, then run one turn under its lock.

    An empty message on a new conversation only creates the conversation.
    """
    if store is None:
        store = conversation_store

    state = store.get(req.conversation_id)
    if state is None:
        state = ConversationState(
            conversation_id=uuid.uuid4().hex,
            context=create_initial_context(),
            current_agent_name=AgentName.TRIAGE.value,
        )
        logger.info("conversation_started", conversation_id=state.conversation_id)
        if not req.message.strip():
            store.save(state)
            return _build_response(state)

    with store.lock(state.conversation_id), structlog.contextvars.bound_contextvars(
        conversation_id=state.conversation_id
    ):
        state = store.get(state.conversation_id) or state
        return _run_turn(state, req.message, store)


# ── Endpoints ────────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {"status": "ok", "timestamp": time.time()}


@app.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest):
    """Send a customer message and get the agents' response."""
    try:
        return handle_chat(req)
    except Exception as exc:
        logger.exception("turn_failed", error=str(exc))
        raise HTTPException(500, config.GENERIC_ERROR_MESSAGE)


def run() -> None:
    uvicorn.run("airline_support.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
