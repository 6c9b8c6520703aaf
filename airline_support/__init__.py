"""
Simulated multi-agent airline customer service engine.
"""
