# Tests package
"""
Test suite for the airline support engine.
- test_guardrails: Relevance / jailbreak guardrail tests
- test_tools: Simulated backend tool tests
- test_handoff: Handoff hook and registry tests
- test_routing: Turn graph dispatch tests
- test_store: Conversation store tests
- test_main: Request handler and HTTP surface tests
"""
