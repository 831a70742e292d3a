"""
Function Catalog - The fixed set of query functions exposed to callers.

Order here is the order introspection reports.
"""

from typing import List

from queries import (
    GetEntityParams, get_entity,
    SearchEntitiesParams, search_entities,
    GetMetricsParams, get_metrics,
    CompareEntitiesParams, compare_entities,
    GetTrendParams, get_trend,
    GetTopEntitiesParams, get_top_entities,
)
from .function_registry import FunctionSpec


QUERY_FUNCTIONS: List[FunctionSpec] = [
    FunctionSpec(
        name='getEntity',
        description='Retrieve a specific entity (author, institution, or journal) by its unique identifier',
        parameters=GetEntityParams,
        implementation=get_entity,
    ),
    FunctionSpec(
        name='searchEntities',
        description='Search for entities by name (case-insensitive substring match)',
        parameters=SearchEntitiesParams,
        implementation=search_entities,
    ),
    FunctionSpec(
        name='getMetrics',
        description='Get the metrics for a specific entity, optionally only the named ones',
        parameters=GetMetricsParams,
        implementation=get_metrics,
    ),
    FunctionSpec(
        name='compareEntities',
        description='Compare two entities on a specific metric and get the difference',
        parameters=CompareEntitiesParams,
        implementation=compare_entities,
    ),
    FunctionSpec(
        name='getTrend',
        description='Get trend data for an entity metric over a time period',
        parameters=GetTrendParams,
        implementation=get_trend,
    ),
    FunctionSpec(
        name='getTopEntities',
        description='Get the top-performing entities ranked by a specific metric',
        parameters=GetTopEntitiesParams,
        implementation=get_top_entities,
    ),
]
