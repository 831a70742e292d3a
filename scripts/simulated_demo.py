#!/usr/bin/env python
"""
Simulated demo - What an LLM conversation over the data layer looks like,
without an API key.

The function calls and their results are real (sent to a running server);
the assistant's wording is scripted.

Start the server first (python main.py), then:
    python scripts/simulated_demo.py
"""

import json
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple

import httpx

# Run from a checkout without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import config


@dataclass(frozen=True)
class Step:
    """One turn: the user speaks, the assistant calls a function, or the assistant answers."""

    speaker: str
    content: str = ''
    function_name: Optional[str] = None
    params: Optional[dict] = None


def user(content: str) -> Step:
    return Step(speaker='user', content=content)


def call(function_name: str, **params) -> Step:
    return Step(speaker='assistant', function_name=function_name, params=params)


def say(content: str) -> Step:
    return Step(speaker='assistant', content=content)


SCENARIOS: List[Tuple[str, List[Step]]] = [
    ('Scenario 1: Simple Ranking Query', [
        user('Who is the most cited author in the database?'),
        call('getTopEntities', entityType='author', metric='citations', limit=1),
        say('Prof. James Anderson (Stanford University) is the most cited author, '
            'with 8,912 citations across 203 publications and an h-index of 58.'),
    ]),
    ('Scenario 2: Institutional Comparison', [
        user('Compare MIT and Oxford on research output'),
        call('searchEntities', entityType='institution', query='Massachusetts', limit=1),
        call('searchEntities', entityType='institution', query='Oxford', limit=1),
        call('compareEntities', entityType='institution',
             entityIdA='inst_001', entityIdB='inst_002', metric='publications'),
        say('MIT has 12,456 publications against Oxford\'s 15,234, about 18% fewer. '
            'Oxford also leads on collaboration rate (72% vs 68%).'),
    ]),
    ('Scenario 3: Trend Analysis', [
        user('Show me the publication trend for Dr. Sarah Chen over the last five years'),
        call('getTrend', entityId='auth_001', metric='publications', startYear=2019, endYear=2023),
        say('Dr. Chen grew from 12 papers in 2019 to a peak of 22 in 2022, '
            'dipping slightly to 19 in 2023.'),
    ]),
    ('Scenario 4: Finding Collaboration Opportunities', [
        user('Show me the top 3 authors by h-index and their institutions'),
        call('getTopEntities', entityType='author', metric='hIndex', limit=3),
        say('1. Prof. James Anderson, Stanford University (h-index 58)\n'
            '   2. Dr. Sarah Chen, MIT (h-index 42)\n'
            '   3. Dr. Maria Rodriguez, Cambridge University (h-index 31)'),
    ]),
]


def query_api(client: httpx.Client, function_name: str, params: dict) -> Any:
    response = client.post(f"/api/query/{function_name}", json=params)
    response.raise_for_status()
    return response.json()['result']


def _indented(value: Any) -> str:
    return '\n'.join('    ' + line for line in json.dumps(value, indent=2).splitlines())


def run_scenario(client: httpx.Client, title: str, steps: List[Step], pause: float = 0.8) -> List[Any]:
    """Play one scenario, executing its function calls. Returns the call results in order."""
    print("\n" + "-" * 60)
    print(title)
    print("-" * 60 + "\n")

    results = []
    for step in steps:
        if step.speaker == 'user':
            print(f'User: "{step.content}"\n')
        elif step.function_name:
            print(f"Assistant (thinking): I need to call {step.function_name}()")
            print("Parameters:")
            print(_indented(step.params))
            result = query_api(client, step.function_name, step.params)
            results.append(result)
            print("Result:")
            print(_indented(result))
            print()
        else:
            print(f"Assistant: {step.content}\n")
        time.sleep(pause)
    return results


def demo():
    print("=" * 60)
    print("SciVal LLM Data Layer - Simulated Demo")
    print("=" * 60)
    print("Function calls and results are real; the assistant's replies are scripted.")

    with httpx.Client(base_url=config.api_base, timeout=10.0) as client:
        for title, steps in SCENARIOS:
            run_scenario(client, title, steps)

    print("\n" + "=" * 60)
    print("Demo complete")
    print("=" * 60)


if __name__ == "__main__":
    demo()
