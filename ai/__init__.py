"""AI module - Claude tool-use client over the query registry."""

from .llm_client import (
    SYSTEM_PROMPT,
    get_client,
    get_tool_definitions,
    execute_tool_call,
    run_conversation,
)

__all__ = [
    'SYSTEM_PROMPT',
    'get_client',
    'get_tool_definitions',
    'execute_tool_call',
    'run_conversation',
]
