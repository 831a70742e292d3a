"""
Function Registry - Single entry point for every query function.

Holds an immutable name -> FunctionSpec mapping built once at import time
and provides:
- introspect()       -> rendered schemas for external discovery
- call()             -> validate + execute, raising RegistryError subclasses
- invoke()           -> same, wrapped in an InvocationResult envelope
- invoke_batch()     -> independent invocations, results in input order

Nothing here knows about HTTP; the API routers translate envelopes.
"""

import copy
import traceback
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from .errors import RegistryError, FunctionNotFound, InvalidParameters, ExecutionFailure, json_kind
from .schema_render import render_parameters


@dataclass(frozen=True)
class FunctionSpec:
    """A registered query function: name, description, parameter model, implementation."""

    name: str
    description: str
    parameters: Type[BaseModel]
    implementation: Callable[[BaseModel], Any]


@dataclass(frozen=True)
class InvocationResult:
    """
    Uniform outcome of one invocation.

    A successful call may carry result=None ("not found"); that is still
    a success, distinct from dispatch or validation failure.
    """

    success: bool
    result: Any = None
    error: Optional[RegistryError] = None

    @property
    def error_type(self) -> Optional[str]:
        return self.error.code if self.error else None

    def to_dict(self) -> dict:
        if self.success:
            return {'success': True, 'result': self.result}
        payload = {'success': False}
        payload.update(self.error.to_dict())
        return payload


def to_jsonable(value: Any) -> Any:
    """Convert query results (dataclasses with to_dict, lists, dicts) to plain JSON data."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    raise TypeError(f"Cannot serialize result of type {type(value).__name__}")


class FunctionRegistry:
    """Immutable dispatch table of query functions."""

    def __init__(self, specs: Iterable[FunctionSpec]):
        functions = {}
        schemas = {}
        for spec in specs:
            if spec.name in functions:
                raise ValueError(f"Duplicate function name: {spec.name}")
            functions[spec.name] = spec
            schemas[spec.name] = render_parameters(spec.parameters)

        self._functions: Mapping[str, FunctionSpec] = MappingProxyType(functions)
        self._schemas: Mapping[str, dict] = MappingProxyType(schemas)
        print(f"[Registry] Registered {len(functions)} functions: {', '.join(functions)}")

    @property
    def functions(self) -> Mapping[str, FunctionSpec]:
        return self._functions

    def names(self) -> List[str]:
        return list(self._functions.keys())

    def get(self, name: str) -> Optional[FunctionSpec]:
        return self._functions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def schema(self, name: str) -> dict:
        """Rendered parameter schema for one function (a copy)."""
        if name not in self._schemas:
            raise FunctionNotFound(name)
        return copy.deepcopy(self._schemas[name])

    def introspect(self) -> List[dict]:
        """Every registered function in declaration order, with its rendered schema."""
        return [
            {
                'name': spec.name,
                'description': spec.description,
                'parameters': self.schema(spec.name),
            }
            for spec in self._functions.values()
        ]

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def validate(self, name: str, raw_params: Any) -> BaseModel:
        """Look up a function and validate raw input against its schema, applying defaults."""
        spec = self._functions.get(name)
        if spec is None:
            raise FunctionNotFound(name)

        if raw_params is None:
            raw_params = {}
        try:
            return spec.parameters.model_validate(raw_params)
        except ValidationError as exc:
            raise InvalidParameters.from_validation_error(exc, self._schemas[name]) from exc

    def call(self, name: str, raw_params: Any) -> Any:
        """Validate and execute. Raises FunctionNotFound, InvalidParameters or ExecutionFailure."""
        params = self.validate(name, raw_params)
        spec = self._functions[name]
        try:
            return to_jsonable(spec.implementation(params))
        except Exception as exc:
            print(f"[Registry] {name} failed: {exc!r}")
            traceback.print_exc()
            raise ExecutionFailure(name, exc) from exc

    def invoke(self, name: str, raw_params: Any) -> InvocationResult:
        """Like call(), but every outcome comes back as an envelope."""
        try:
            return InvocationResult(success=True, result=self.call(name, raw_params))
        except RegistryError as exc:
            return InvocationResult(success=False, error=exc)

    def invoke_batch(self, calls: Iterable[Any]) -> List[InvocationResult]:
        """
        Invoke each {functionName, params} item independently.

        One item failing never affects another; there is no rollback because
        nothing is mutated. Output order matches input order.
        """
        results = []
        for item in calls:
            name = item.get('functionName') if isinstance(item, dict) else None
            if not isinstance(name, str):
                results.append(InvocationResult(success=False, error=_malformed_batch_item(item)))
                continue
            results.append(self.invoke(name, item.get('params')))
        return results


def _malformed_batch_item(item: Any) -> InvalidParameters:
    if not isinstance(item, dict):
        return InvalidParameters([{
            'field': '<root>',
            'path': [],
            'code': 'model_type',
            'message': 'Batch item should be an object with functionName and params',
            'expected': 'object',
            'received': item,
            'receivedType': json_kind(item),
        }])

    name = item.get('functionName')
    return InvalidParameters([{
        'field': 'functionName',
        'path': ['functionName'],
        'code': 'missing' if name is None else 'string_type',
        'message': 'Field required' if name is None else 'Input should be a valid string',
        'expected': 'string',
        'received': name,
        'receivedType': 'missing' if name is None else json_kind(name),
    }])
