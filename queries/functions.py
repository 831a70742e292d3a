"""
Query Functions - The six read-only analytics queries.

Every function takes a validated parameter model and returns either a
result or None for "not found". None is a normal answer, not an error.
"""

import math
from typing import Any, Dict, List, Optional

from data import dataset, Entity, TrendPoint, ComparedEntity, ComparisonResult
from .schemas import (
    GetEntityParams,
    SearchEntitiesParams,
    GetMetricsParams,
    CompareEntitiesParams,
    GetTrendParams,
    GetTopEntitiesParams,
)


# =============================================================================
# METRIC HELPERS
# =============================================================================

def resolve_metric(metrics: Dict[str, Any], name: str) -> Any:
    """
    Look up a metric by name, allowing one level of nesting.

    "citations" reads a top-level key; "outputsInTopCitationPercentiles.top1"
    reads inside the nested mapping. Returns None when absent.
    """
    if name in metrics:
        return metrics[name]
    head, sep, tail = name.partition('.')
    if sep:
        nested = metrics.get(head)
        if isinstance(nested, dict):
            return nested.get(tail)
    return None


def numeric_value(value: Any) -> Optional[float]:
    """Return value if it is a real number, else None (bools and nested dicts don't count)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


# =============================================================================
# QUERIES
# =============================================================================

def get_entity(params: GetEntityParams) -> Optional[Entity]:
    """Retrieve one entity by exact id within its collection."""
    return dataset.find(params.entity_type, params.entity_id)


def search_entities(params: SearchEntitiesParams) -> List[Entity]:
    """Case-insensitive substring search on entity names, collection order, capped at limit."""
    needle = params.query.casefold()
    matches = dataset.filter(params.entity_type, lambda entity: needle in entity.name.casefold())
    return matches[:params.limit]


def get_metrics(params: GetMetricsParams) -> Optional[Dict[str, Any]]:
    """
    All metrics of an entity, or only the requested ones.

    Requested names that don't exist are skipped. Dotted names pick a single
    nested value and come back under the dotted key.
    """
    entity = dataset.find(params.entity_type, params.entity_id)
    if entity is None:
        return None

    metrics = entity.to_dict()['metrics']
    if not params.metric_names:
        return metrics

    selected: Dict[str, Any] = {}
    for name in params.metric_names:
        if name in selected:
            continue
        value = resolve_metric(metrics, name)
        if value is not None:
            selected[name] = value
    return selected


def compare_entities(params: CompareEntitiesParams) -> Optional[ComparisonResult]:
    """
    Compare two entities of the same kind on one metric.

    Returns None unless both entities exist and both carry a numeric value
    for the metric. percent_difference is relative to B (0 when B is 0).
    """
    entity_a = dataset.find(params.entity_type, params.entity_id_a)
    entity_b = dataset.find(params.entity_type, params.entity_id_b)
    if entity_a is None or entity_b is None:
        return None

    value_a = numeric_value(resolve_metric(entity_a.metrics, params.metric))
    value_b = numeric_value(resolve_metric(entity_b.metrics, params.metric))
    if value_a is None or value_b is None:
        return None

    difference = value_a - value_b
    percent_difference = (difference / value_b) * 100 if value_b != 0 else 0

    return ComparisonResult(
        entity_a=ComparedEntity(id=entity_a.id, name=entity_a.name, value=value_a),
        entity_b=ComparedEntity(id=entity_b.id, name=entity_b.name, value=value_b),
        difference=difference,
        percent_difference=percent_difference,
    )


def get_trend(params: GetTrendParams) -> Optional[List[TrendPoint]]:
    """Yearly series for (entity, metric), optionally clipped to an inclusive year range."""
    return dataset.trend(
        params.entity_id,
        params.metric,
        start_year=params.start_year,
        end_year=params.end_year,
    )


def get_top_entities(params: GetTopEntitiesParams) -> List[Entity]:
    """
    Entities ranked by a metric, highest first.

    Missing or non-numeric values rank as 0. sorted() is stable, so ties
    keep collection order.
    """
    def rank_value(entity: Entity) -> float:
        value = numeric_value(resolve_metric(entity.metrics, params.metric))
        return value if value is not None else 0

    ranked = sorted(dataset.entities(params.entity_type), key=rank_value, reverse=True)
    return ranked[:params.limit]
