"""
Triage Agent prompt — delegates requests to the specialists.
"""

from airline_support.prompts.shared_blocks import RECOMMENDED_PROMPT_PREFIX


def build_triage_prompt(context) -> str:
    return (
        f"{RECOMMENDED_PROMPT_PREFIX} "
        "You are a helpful triaging agent. You can use your tools to delegate "
        "questions to other appropriate agents."
    )
