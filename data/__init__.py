"""Data module - Static scholarly dataset and entity models."""

from .models import (
    Author,
    Institution,
    Journal,
    Entity,
    TrendPoint,
    ComparedEntity,
    ComparisonResult,
)
from .dataset import Dataset, dataset

__all__ = [
    'Author',
    'Institution',
    'Journal',
    'Entity',
    'TrendPoint',
    'ComparedEntity',
    'ComparisonResult',
    'Dataset',
    'dataset',
]
