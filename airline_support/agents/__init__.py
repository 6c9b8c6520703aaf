# Agents package - Registry and per-agent transition functions
"""
Agents for the airline support engine.
- AgentName / Agent: identities and static descriptors
- AGENTS, get_agent, get_agent_by_name, build_agents_list: read-only registry

Note: the per-agent transition functions live in airline_support.agents.specialists
"""

from airline_support.agents.registry import (
    AGENTS,
    Agent,
    AgentName,
    build_agents_list,
    get_agent,
    get_agent_by_name,
)

__all__ = [
    "AGENTS",
    "Agent",
    "AgentName",
    "build_agents_list",
    "get_agent",
    "get_agent_by_name",
]
