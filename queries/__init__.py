"""Queries module - Parameter schemas and the six query functions."""

from .schemas import (
    EntityType,
    QueryParams,
    GetEntityParams,
    SearchEntitiesParams,
    GetMetricsParams,
    CompareEntitiesParams,
    GetTrendParams,
    GetTopEntitiesParams,
)
from .functions import (
    get_entity,
    search_entities,
    get_metrics,
    compare_entities,
    get_trend,
    get_top_entities,
    resolve_metric,
    numeric_value,
)

__all__ = [
    'EntityType',
    'QueryParams',
    'GetEntityParams',
    'SearchEntitiesParams',
    'GetMetricsParams',
    'CompareEntitiesParams',
    'GetTrendParams',
    'GetTopEntitiesParams',
    'get_entity',
    'search_entities',
    'get_metrics',
    'compare_entities',
    'get_trend',
    'get_top_entities',
    'resolve_metric',
    'numeric_value',
]
