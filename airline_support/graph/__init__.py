# Graph package - LangGraph turn processor
"""
Turn processor for the airline support engine.
- TurnState / TurnResult: per-turn state and outcome
- build_graph / compile_graph: graph construction
- process_turn: run one user message through the active agent
"""

from airline_support.graph.graph_builder import build_graph, compile_graph, process_turn
from airline_support.graph.state import TurnResult, TurnState

__all__ = [
    "TurnResult",
    "TurnState",
    "build_graph",
    "compile_graph",
    "process_turn",
]
