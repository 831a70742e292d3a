"""
Schema Rendering - Turn a parameter model into a JSON-Schema-style description.

This is what LLM callers receive from the functions endpoint. The
`required` list mirrors validation exactly: a field is required iff
pydantic would reject a call that leaves it out.
"""

import types
from enum import Enum
from typing import Any, Iterable, Literal, Type, Union, get_args, get_origin

from pydantic import BaseModel


_PRIMITIVES = (
    (bool, 'boolean'),  # before int: bool is an int subclass
    (int, 'integer'),
    (float, 'number'),
    (str, 'string'),
)

_BOUND_KEYWORDS = (
    ('ge', 'minimum'),
    ('le', 'maximum'),
    ('gt', 'exclusiveMinimum'),
    ('lt', 'exclusiveMaximum'),
)


def render_parameters(model: Type[BaseModel]) -> dict:
    """Render a pydantic model as an object schema keyed by wire (alias) names."""
    properties = {}
    required = []

    for name, info in model.model_fields.items():
        key = info.alias or name
        prop = render_annotation(info.annotation)
        if info.description:
            prop['description'] = info.description
        prop.update(render_bounds(info.metadata))

        if info.is_required():
            required.append(key)
        else:
            default = info.get_default(call_default_factory=True)
            if isinstance(default, Enum):
                default = default.value
            if default is not None:
                prop['default'] = default

        properties[key] = prop

    schema: dict = {'type': 'object', 'properties': properties}
    if required:
        schema['required'] = required
    return schema


def render_bounds(metadata: Iterable[Any]) -> dict:
    """Numeric limits from Field(ge=..., lt=...) as JSON Schema keywords."""
    bounds = {}
    for constraint in metadata:
        for attr, keyword in _BOUND_KEYWORDS:
            value = getattr(constraint, attr, None)
            if value is not None:
                bounds[keyword] = value
    return bounds


def render_annotation(annotation: Any) -> dict:
    """Render one type annotation. Raises TypeError for shapes callers can't express."""
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1:
            return render_annotation(members[0])
        return {'anyOf': [render_annotation(member) for member in members]}

    if origin is Literal:
        values = list(args)
        rendered = _primitive(type(values[0])) if values else {}
        rendered['enum'] = values
        return rendered

    if origin in (list, tuple, set, frozenset):
        return {'type': 'array', 'items': render_annotation(args[0]) if args else {}}

    if origin is dict:
        return {'type': 'object'}

    if isinstance(annotation, type):
        if issubclass(annotation, BaseModel):
            return render_parameters(annotation)
        if issubclass(annotation, Enum):
            values = [member.value for member in annotation]
            rendered = _primitive(type(values[0])) if values else {}
            rendered['enum'] = values
            return rendered
        rendered = _primitive(annotation)
        if rendered:
            return rendered

    raise TypeError(f"Cannot render parameter annotation {annotation!r}")


def _primitive(tp: type) -> dict:
    for py_type, json_type in _PRIMITIVES:
        if issubclass(tp, py_type):
            return {'type': json_type}
    return {}
