"""
LLM Tool-Use Client - Lets Claude answer questions by calling the registry.

The model sees every registered function as a tool (schemas come straight
from introspection), requests calls, and gets the invocation envelopes back
as tool results. All numbers come from the query functions; the model only
interprets them.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from config import config
from registry import registry

SYSTEM_PROMPT = (
    "You are a research analytics assistant with access to the SciVal database. "
    "Use the provided tools to answer questions about authors, institutions, and journals. "
    "Never estimate a number yourself; if a tool returns null, say the data is not available."
)

# Lazy import Anthropic to avoid startup issues
_client = None


def get_client():
    """Get or create the Anthropic client."""
    global _client
    if _client is None:
        if not config.anthropic_api_key:
            return None
        from anthropic import Anthropic
        _client = Anthropic(api_key=config.anthropic_api_key)
    return _client


def get_tool_definitions() -> List[Dict[str, Any]]:
    """Registry introspection in Anthropic's tool format."""
    return [
        {
            'name': function['name'],
            'description': function['description'],
            'input_schema': function['parameters'],
        }
        for function in registry.introspect()
    ]


def execute_tool_call(name: str, arguments: Any) -> Tuple[str, bool]:
    """Run one tool request through the registry. Returns (JSON content, is_error)."""
    outcome = registry.invoke(name, arguments)
    if outcome.success:
        return json.dumps(outcome.result), False
    return json.dumps(outcome.error.to_dict()), True


def run_conversation(
    question: str,
    client=None,
    max_iterations: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Answer a question with a bounded tool-use loop.

    Args:
        question: The user's question
        client: Anthropic client (defaults to the shared one from config)
        max_iterations: Model turns allowed (defaults to config.max_tool_iterations)

    Returns:
        Dict with 'answer' (None if the loop ran out of turns),
        'tool_calls' (name, input, is_error for each call) and 'iterations'
    """
    client = client or get_client()
    if client is None:
        raise RuntimeError("ANTHROPIC_API_KEY is not set")
    if max_iterations is None:
        max_iterations = config.max_tool_iterations

    tools = get_tool_definitions()
    messages: List[Dict[str, Any]] = [{'role': 'user', 'content': question}]
    tool_calls: List[Dict[str, Any]] = []

    for iteration in range(1, max_iterations + 1):
        response = client.messages.create(
            model=config.default_model,
            max_tokens=1024,
            system=SYSTEM_PROMPT,
            tools=tools,
            messages=messages,
        )
        tool_uses = [block for block in response.content if block.type == 'tool_use']

        if not tool_uses:
            answer = ''.join(block.text for block in response.content if block.type == 'text')
            return {'answer': answer.strip(), 'tool_calls': tool_calls, 'iterations': iteration}

        messages.append({'role': 'assistant', 'content': response.content})

        results = []
        for block in tool_uses:
            content, is_error = execute_tool_call(block.name, block.input)
            print(f"[AI] {block.name}({json.dumps(block.input)}) -> {'error' if is_error else 'ok'}")
            tool_calls.append({'name': block.name, 'input': block.input, 'is_error': is_error})
            results.append({
                'type': 'tool_result',
                'tool_use_id': block.id,
                'content': content,
                'is_error': is_error,
            })
        messages.append({'role': 'user', 'content': results})

    print(f"[AI] Maximum tool iterations reached ({max_iterations})")
    return {'answer': None, 'tool_calls': tool_calls, 'iterations': max_iterations}
