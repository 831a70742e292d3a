"""
Entity Models - Authors, institutions and journals.

All three kinds share {id, name, metrics}; each adds one descriptive field.
Entities are frozen: the dataset builds them once and never mutates them.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union


@dataclass(frozen=True)
class Author:
    """A researcher with scholarly output metrics."""

    id: str
    name: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    affiliation: Optional[str] = None

    def to_dict(self) -> dict:
        data = {'id': self.id, 'name': self.name}
        if self.affiliation is not None:
            data['affiliation'] = self.affiliation
        data['metrics'] = _copy_metrics(self.metrics)
        return data


@dataclass(frozen=True)
class Institution:
    """A university or research organisation."""

    id: str
    name: str
    country: str
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'country': self.country,
            'metrics': _copy_metrics(self.metrics),
        }


@dataclass(frozen=True)
class Journal:
    """A publication venue with citation-based metrics."""

    id: str
    name: str
    publisher: str
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'publisher': self.publisher,
            'metrics': _copy_metrics(self.metrics),
        }


Entity = Union[Author, Institution, Journal]


@dataclass(frozen=True)
class TrendPoint:
    """One yearly observation in a trend series."""

    year: int
    value: float

    def to_dict(self) -> dict:
        return {'year': self.year, 'value': self.value}


@dataclass(frozen=True)
class ComparedEntity:
    """One side of a comparison."""

    id: str
    name: str
    value: float

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name, 'value': self.value}


@dataclass(frozen=True)
class ComparisonResult:
    """
    Result of comparing two entities on one metric.

    percent_difference is relative to entity B and is 0 when B's value is 0.
    """

    entity_a: ComparedEntity
    entity_b: ComparedEntity
    difference: float
    percent_difference: float

    def to_dict(self) -> dict:
        return {
            'entityA': self.entity_a.to_dict(),
            'entityB': self.entity_b.to_dict(),
            'difference': self.difference,
            'percentDifference': self.percent_difference,
        }


def _copy_metrics(metrics: Dict[str, Any]) -> Dict[str, Any]:
    """Copy one level of nesting so callers can't reach the stored dicts."""
    return {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in metrics.items()
    }
