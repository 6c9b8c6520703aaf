"""
Turn graph — one user message in, one agent step out.

input_guardrails → <active agent node> → context_update → END

- input_guardrails raises GuardrailRejected on the first failing guardrail,
  before any agent node runs.
- Exactly one agent node runs per turn, picked from AGENT_NODES by the active
  agent's name. With no user message in the history the agent step is skipped.
- context_update diffs the context before and after the agent step and emits
  one context_update event when any field changed.
"""

from __future__ import annotations

from typing import Optional

from langgraph.graph import END, START, StateGraph

from airline_support.agents.registry import Agent, AgentName, get_agent
from airline_support.agents.specialists import AGENT_NODES
from airline_support.context import AirlineAgentContext
from airline_support.errors import GuardrailRejected
from airline_support.graph.state import TurnResult, TurnState
from airline_support.patterns.guardrails import evaluate_guardrail, get_guardrail_name
from airline_support.tracing.logging import get_logger
from airline_support.tracing.models import create_agent_event

logger = get_logger(__name__)

_CONTEXT_UPDATE = "context_update"


def agent_node_name(agent: AgentName) -> str:
    return f"{agent.name.lower()}_agent"


def _latest_user_message(input_items: list) -> Optional[str]:
    for item in reversed(input_items or []):
        if getattr(item, "type", None) == "human":
            return item.content
    return None


# ═════════════════════════════════════════════════════════════════════════════
# Input guardrails
# ═════════════════════════════════════════════════════════════════════════════

def input_guardrails_node(state: TurnState) -> dict:
    """Run the active agent's guardrails, in order, on the latest user message."""
    agent = get_agent(state["agent_name"])
    user_message = _latest_user_message(state.get("input_items"))
    if user_message is None:
        return {"user_message": None, "guardrail_results": []}

    results = []
    for guardrail in agent.input_guardrails:
        output = evaluate_guardrail(guardrail, user_message)
        if not output.passed:
            logger.info(
                "guardrail_rejected",
                agent=agent.name,
                guardrail=guardrail,
                reasoning=output.reasoning,
            )
            raise GuardrailRejected(
                f"{get_guardrail_name(guardrail)} check failed", guardrail, output
            )
        results.append((guardrail, output))

    return {"user_message": user_message, "guardrail_results": results}


def _route_after_input_guardrails(state: TurnState) -> str:
    if state.get("user_message") is None:
        return _CONTEXT_UPDATE
    return agent_node_name(AgentName(state["agent_name"]))


# ═════════════════════════════════════════════════════════════════════════════
# Context diff
# ═════════════════════════════════════════════════════════════════════════════

def context_update_node(state: TurnState) -> dict:
    """Emit a context_update event listing every field the agent step changed."""
    before: AirlineAgentContext = state["context"]
    after: AirlineAgentContext = state.get("next_context") or before
    next_agent = state.get("next_agent") or state["agent_name"]
    events = list(state.get("events") or [])

    changes = before.diff(after)
    if changes:
        events.append(create_agent_event(_CONTEXT_UPDATE, next_agent, "", {"changes": changes}))
        logger.info("context_updated", agent=next_agent, changed=sorted(changes))

    return {
        "messages": list(state.get("messages") or []),
        "events": events,
        "next_agent": next_agent,
        "next_context": after,
    }


# ═════════════════════════════════════════════════════════════════════════════
# Build Graph
# ═════════════════════════════════════════════════════════════════════════════

def build_graph() -> StateGraph:
    """Construct the turn graph."""
    missing = set(AgentName) - set(AGENT_NODES)
    if missing:
        raise RuntimeError(f"No transition function for: {sorted(a.value for a in missing)}")

    graph = StateGraph(TurnState)

    # ── Nodes ────────────────────────────────────────────────────────────
    graph.add_node("input_guardrails", input_guardrails_node)
    for agent, node in AGENT_NODES.items():
        graph.add_node(agent_node_name(agent), node)
    graph.add_node(_CONTEXT_UPDATE, context_update_node)

    # ── Edges ────────────────────────────────────────────────────────────
    graph.add_edge(START, "input_guardrails")

    routes = {agent_node_name(agent): agent_node_name(agent) for agent in AGENT_NODES}
    routes[_CONTEXT_UPDATE] = _CONTEXT_UPDATE
    graph.add_conditional_edges("input_guardrails", _route_after_input_guardrails, routes)

    for agent in AGENT_NODES:
        graph.add_edge(agent_node_name(agent), _CONTEXT_UPDATE)
    graph.add_edge(_CONTEXT_UPDATE, END)

    return graph


_compiled_graph = None


def compile_graph():
    """Build and compile the turn graph once per process."""
    global _compiled_graph
    if _compiled_graph is None:
        _compiled_graph = build_graph().compile()
    return _compiled_graph


def process_turn(agent: Agent, input_items: list, context: AirlineAgentContext) -> TurnResult:
    """Run one turn for ``agent``.

    Raises GuardrailRejected when a required guardrail rejects the latest user
    message, and lets RequiredFieldMissing from the tools propagate.
    """
    final = compile_graph().invoke(
        {
            "agent_name": agent.name,
            "input_items": list(input_items),
            "context": context,
        }
    )
    return TurnResult(
        messages=final.get("messages", []),
        events=final.get("events", []),
        current_agent=final.get("next_agent", agent.name),
        context=final.get("next_context", context),
        guardrail_results=final.get("guardrail_results", []),
    )
