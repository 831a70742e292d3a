"""Registry module - Query function dispatch, validation and introspection."""

from .errors import RegistryError, FunctionNotFound, InvalidParameters, ExecutionFailure
from .function_registry import FunctionSpec, FunctionRegistry, InvocationResult, to_jsonable
from .schema_render import render_parameters
from .catalog import QUERY_FUNCTIONS

# Global registry instance
registry = FunctionRegistry(QUERY_FUNCTIONS)

__all__ = [
    'RegistryError',
    'FunctionNotFound',
    'InvalidParameters',
    'ExecutionFailure',
    'FunctionSpec',
    'FunctionRegistry',
    'InvocationResult',
    'to_jsonable',
    'render_parameters',
    'QUERY_FUNCTIONS',
    'registry',
]
