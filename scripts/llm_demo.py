#!/usr/bin/env python
"""
LLM demo - Claude answers research questions by calling the query functions.

Usage:
    ANTHROPIC_API_KEY=... python scripts/llm_demo.py
"""

import json
import sys
from pathlib import Path

# Run from a checkout without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import config
from ai import run_conversation


SCENARIOS = [
    ('Simple Query', 'Who is the most cited author in the database?'),
    ('Comparison', 'How does MIT compare to Oxford in terms of research output?'),
    ('Trend Analysis', 'Show me the publication trend for Dr. Sarah Chen since 2020.'),
]


def demo():
    print("=" * 60)
    print("SciVal LLM Data Layer - Live AI Integration Demo")
    print("=" * 60)

    for title, question in SCENARIOS:
        print("\n" + "-" * 60)
        print(f"Scenario: {title}")
        print(f"Question: {question}")
        print("-" * 60)

        outcome = run_conversation(question)
        for call in outcome['tool_calls']:
            print(f"  tool: {call['name']}({json.dumps(call['input'])})")
        print(f"\nAnswer ({outcome['iterations']} turns):\n{outcome['answer'] or '(no answer, turn limit reached)'}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    if not config.anthropic_api_key:
        print("ANTHROPIC_API_KEY environment variable not set")
        sys.exit(1)
    demo()
