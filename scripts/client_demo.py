#!/usr/bin/env python
"""
Client demo - Calls a running data layer over HTTP.

Start the server first (python main.py), then (DATA_LAYER_API_BASE overrides the address):
    python scripts/client_demo.py
"""

import sys
from pathlib import Path

import httpx

# Run from a checkout without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import config


def query_api(client: httpx.Client, function_name: str, params: dict) -> dict:
    response = client.post(f"/api/query/{function_name}", json=params)
    return response.json()


def batch_query(client: httpx.Client, queries: list) -> dict:
    response = client.post("/api/batch", json={"queries": queries})
    return response.json()


def demo():
    print("=" * 60)
    print("SciVal LLM Data Layer - Client Demo")
    print("=" * 60)

    with httpx.Client(base_url=config.api_base, timeout=10.0) as client:
        print("\n1. Search for authors named 'Chen'")
        authors = query_api(client, 'searchEntities', {'entityType': 'author', 'query': 'Chen', 'limit': 3})['result']
        print(f"Found {len(authors)} author(s):")
        for author in authors:
            print(f"  - {author['name']} ({author.get('affiliation', 'n/a')}): "
                  f"{author['metrics']['publications']} publications")

        print("\n2. Compare citations of two authors")
        comparison = query_api(client, 'compareEntities', {
            'entityType': 'author', 'entityIdA': 'auth_002', 'entityIdB': 'auth_001', 'metric': 'citations',
        })['result']
        print(f"  {comparison['entityA']['name']}: {comparison['entityA']['value']} citations")
        print(f"  {comparison['entityB']['name']}: {comparison['entityB']['value']} citations")
        print(f"  Difference: {comparison['difference']} ({comparison['percentDifference']:.1f}% more)")

        print("\n3. Publication trend for Dr. Sarah Chen (2020-2023)")
        trend = query_api(client, 'getTrend', {
            'entityId': 'auth_001', 'metric': 'publications', 'startYear': 2020, 'endYear': 2023,
        })['result']
        for point in trend:
            print(f"  {point['year']}: {point['value']}")

        print("\n4. Top institutions by publications")
        top = query_api(client, 'getTopEntities', {'entityType': 'institution', 'metric': 'publications', 'limit': 3})['result']
        for rank, institution in enumerate(top, start=1):
            print(f"  {rank}. {institution['name']}: {institution['metrics']['publications']}")

        print("\n5. Batch: one valid call, one with a bad entity type")
        batch = batch_query(client, [
            {'functionName': 'getEntity', 'params': {'entityType': 'journal', 'entityId': 'jour_001'}},
            {'functionName': 'getEntity', 'params': {'entityType': 'person', 'entityId': 'x'}},
        ])
        for index, item in enumerate(batch['results']):
            status = 'ok' if item['success'] else f"failed ({item['errorType']})"
            print(f"  [{index}] {status}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    demo()
