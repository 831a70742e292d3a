from enum import Enum
from typing import Dict, List, Literal, Optional

import pytest
from pydantic import BaseModel, Field

from queries import (
    SearchEntitiesParams, GetMetricsParams, GetTrendParams, CompareEntitiesParams, GetTopEntitiesParams,
)
from registry import render_parameters
from registry.schema_render import render_annotation


def test_search_entities_schema() -> None:
    schema = render_parameters(SearchEntitiesParams)
    assert schema['type'] == 'object'
    assert schema['required'] == ['entityType', 'query']
    assert schema['properties']['entityType'] == {
        'type': 'string',
        'enum': ['author', 'institution', 'journal'],
        'description': 'Type of entity to search',
    }
    assert schema['properties']['limit']['type'] == 'integer'
    assert schema['properties']['limit']['default'] == 10


def test_optional_array_field_is_not_required() -> None:
    schema = render_parameters(GetMetricsParams)
    assert schema['required'] == ['entityType', 'entityId']
    assert schema['properties']['metricNames']['type'] == 'array'
    assert schema['properties']['metricNames']['items'] == {'type': 'string'}
    assert 'default' not in schema['properties']['metricNames']


def test_optional_year_bounds_not_required() -> None:
    schema = render_parameters(GetTrendParams)
    assert schema['required'] == ['entityId', 'metric']
    assert schema['properties']['startYear']['type'] == 'integer'
    assert schema['properties']['endYear']['type'] == 'integer'


def test_properties_use_wire_names() -> None:
    schema = render_parameters(CompareEntitiesParams)
    assert list(schema['properties']) == ['entityType', 'entityIdA', 'entityIdB', 'metric']


class _Color(str, Enum):
    RED = 'red'
    BLUE = 'blue'


class _Inner(BaseModel):
    weight: float
    label: Optional[str] = None


class _Outer(BaseModel):
    inner: _Inner
    flag: bool = False
    color: _Color = _Color.RED
    tags: List[str] = Field(default_factory=list)
    extra: Dict[str, int] = Field(default_factory=dict)
    required_but_nullable: Optional[int]


def test_nested_model_shape() -> None:
    schema = render_parameters(_Outer)
    inner = schema['properties']['inner']
    assert inner['type'] == 'object'
    assert inner['properties']['weight'] == {'type': 'number'}
    assert inner['required'] == ['weight']


def test_required_mirrors_validation() -> None:
    schema = render_parameters(_Outer)
    assert schema['required'] == ['inner', 'required_but_nullable']
    assert schema['properties']['flag'] == {'type': 'boolean', 'default': False}
    assert schema['properties']['tags']['default'] == []


def test_enum_class_rendered_as_enum() -> None:
    assert render_annotation(_Color) == {'type': 'string', 'enum': ['red', 'blue']}


def test_literal_of_ints() -> None:
    assert render_annotation(Literal[1, 2]) == {'type': 'integer', 'enum': [1, 2]}


def test_unsupported_annotation_raises() -> None:
    with pytest.raises(TypeError):
        render_annotation(bytes)


@pytest.mark.parametrize("model", [SearchEntitiesParams, GetTopEntitiesParams])
def test_limit_advertises_minimum(model) -> None:
    limit = render_parameters(model)['properties']['limit']
    assert limit['minimum'] == 0
    assert 'maximum' not in limit


class _Bounded(BaseModel):
    score: float = Field(gt=0, le=1)
    page: int = Field(1, ge=1, lt=100)


def test_numeric_bounds_rendered() -> None:
    properties = render_parameters(_Bounded)['properties']
    assert properties['score'] == {'type': 'number', 'exclusiveMinimum': 0, 'maximum': 1}
    assert properties['page'] == {
        'type': 'integer', 'minimum': 1, 'exclusiveMaximum': 100, 'default': 1,
    }
