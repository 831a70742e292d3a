"""
In-Memory Dataset - Single source of truth for entities and trend series.

Read-only access shape:
- entities(kind)              -> all entities of a kind, insertion order
- find(kind, id)              -> one entity or None
- filter(kind, predicate)     -> matching entities, insertion order
- trend(id, metric, ...)      -> ordered yearly points or None

Trend series are held in a pandas DataFrame keyed by (entity_id, metric).
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from .models import Author, Institution, Journal, Entity, TrendPoint
from .fixtures import AUTHORS, INSTITUTIONS, JOURNALS, TRENDS


TREND_COLUMNS = ['entity_id', 'metric', 'year', 'value']


class Dataset:
    """Static collections of authors, institutions and journals plus their trends."""

    def __init__(
        self,
        authors: Iterable[Author],
        institutions: Iterable[Institution],
        journals: Iterable[Journal],
        trends: Dict[Tuple[str, str], List[Tuple[int, float]]],
    ):
        self._collections: Dict[str, Tuple[Entity, ...]] = {
            'author': tuple(authors),
            'institution': tuple(institutions),
            'journal': tuple(journals),
        }
        self._trends = self._build_trend_frame(trends)

    @staticmethod
    def _build_trend_frame(trends: Dict[Tuple[str, str], List[Tuple[int, float]]]) -> pd.DataFrame:
        """Flatten the series mapping into one frame and check year ordering."""
        rows = [
            (entity_id, metric, year, value)
            for (entity_id, metric), points in trends.items()
            for year, value in points
        ]
        frame = pd.DataFrame(rows, columns=TREND_COLUMNS)

        for (entity_id, metric), group in frame.groupby(['entity_id', 'metric'], sort=False):
            years = group['year']
            if not (years.is_monotonic_increasing and years.is_unique):
                raise ValueError(
                    f"Trend series {entity_id}/{metric} must have unique, ascending years"
                )

        return frame.sort_values(['entity_id', 'metric', 'year'], kind='mergesort').reset_index(drop=True)

    def entities(self, entity_type: str) -> Tuple[Entity, ...]:
        """All entities of one kind. Raises KeyError for an unknown kind."""
        return self._collections[entity_type]

    def find(self, entity_type: str, entity_id: str) -> Optional[Entity]:
        """Exact-match lookup by id (linear scan)."""
        for entity in self.entities(entity_type):
            if entity.id == entity_id:
                return entity
        return None

    def filter(self, entity_type: str, predicate: Callable[[Entity], bool]) -> List[Entity]:
        """Entities of one kind satisfying predicate, in insertion order."""
        return [entity for entity in self.entities(entity_type) if predicate(entity)]

    def tracked_metrics(self, entity_id: str) -> List[str]:
        """Metric names that have a trend series for this entity."""
        rows = self._trends.loc[self._trends['entity_id'] == entity_id, 'metric']
        return list(dict.fromkeys(rows.tolist()))

    def trend(
        self,
        entity_id: str,
        metric: str,
        start_year: Optional[int] = None,
        end_year: Optional[int] = None,
    ) -> Optional[List[TrendPoint]]:
        """
        Yearly points for one (entity, metric) series, ascending by year.

        Bounds are inclusive and independent; None leaves that side open.
        Returns None when the series does not exist, and an empty list when
        it exists but no point falls inside the bounds.
        """
        frame = self._trends
        series = frame.loc[(frame['entity_id'] == entity_id) & (frame['metric'] == metric)]
        if series.empty:
            return None

        if start_year is not None:
            series = series.loc[series['year'] >= start_year]
        if end_year is not None:
            series = series.loc[series['year'] <= end_year]

        return [
            TrendPoint(year=year, value=value)
            for year, value in zip(series['year'].tolist(), series['value'].tolist())
        ]

    def stats(self) -> dict:
        """Collection sizes, for status endpoints and the startup banner."""
        counts = {kind: len(items) for kind, items in self._collections.items()}
        counts['trend_series'] = int(self._trends.groupby(['entity_id', 'metric']).ngroups)
        return counts


# Global dataset instance
dataset = Dataset(AUTHORS, INSTITUTIONS, JOURNALS, TRENDS)
