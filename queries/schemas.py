"""
Parameter Schemas - One pydantic model per query function.

Field names are snake_case in Python and camelCase on the wire (aliases),
which is the shape LLM callers see through introspection.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


EntityType = Literal['author', 'institution', 'journal']


class QueryParams(BaseModel):
    """Base for all parameter models: accept wire or Python names, immutable once validated."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class GetEntityParams(QueryParams):
    entity_type: EntityType = Field(alias='entityType', description='Type of entity to retrieve')
    entity_id: str = Field(alias='entityId', description='Unique identifier for the entity')


class SearchEntitiesParams(QueryParams):
    entity_type: EntityType = Field(alias='entityType', description='Type of entity to search')
    query: str = Field(description='Search query string (case-insensitive substring of the name)')
    limit: int = Field(10, ge=0, description='Maximum number of results')


class GetMetricsParams(QueryParams):
    entity_type: EntityType = Field(alias='entityType', description='Type of entity')
    entity_id: str = Field(alias='entityId', description='Entity identifier')
    metric_names: Optional[List[str]] = Field(
        None,
        alias='metricNames',
        description='Specific metrics to retrieve (all if not specified)',
    )


class CompareEntitiesParams(QueryParams):
    entity_type: EntityType = Field(alias='entityType', description='Type of entities to compare')
    entity_id_a: str = Field(alias='entityIdA', description='First entity identifier')
    entity_id_b: str = Field(alias='entityIdB', description='Second entity identifier')
    metric: str = Field(description='Metric to compare (e.g., citations, hIndex)')


class GetTrendParams(QueryParams):
    entity_id: str = Field(alias='entityId', description='Entity identifier')
    metric: str = Field(description='Metric to track over time')
    start_year: Optional[int] = Field(
        None, alias='startYear', description='Start year (defaults to earliest available)'
    )
    end_year: Optional[int] = Field(
        None, alias='endYear', description='End year (defaults to latest available)'
    )


class GetTopEntitiesParams(QueryParams):
    entity_type: EntityType = Field(alias='entityType', description='Type of entity')
    metric: str = Field(description='Metric to rank by')
    limit: int = Field(10, ge=0, description='Number of top entities to return')
