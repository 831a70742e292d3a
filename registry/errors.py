"""
Registry Errors - Failures raised while dispatching a query function.

A query that finds nothing is NOT an error; it returns None through the
success channel. These exceptions cover everything else.
"""

from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError


class RegistryError(Exception):
    """Base class for dispatch failures. `code` is the stable machine-readable tag."""

    code = 'registry_error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'error': self.message, 'errorType': self.code}


class FunctionNotFound(RegistryError):
    """The requested function name is not registered."""

    code = 'function_not_found'

    def __init__(self, function_name: str):
        super().__init__(f"Function '{function_name}' not found")
        self.function_name = function_name


class InvalidParameters(RegistryError):
    """Input failed schema validation. `details` lists one entry per offending field."""

    code = 'invalid_parameters'

    def __init__(self, details: List[Dict[str, Any]]):
        super().__init__('Invalid parameters')
        self.details = details

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload['details'] = self.details
        return payload

    @classmethod
    def from_validation_error(cls, exc: ValidationError, schema: dict) -> "InvalidParameters":
        """Translate pydantic errors into field-level details using the rendered schema."""
        return cls([field_error(err, schema) for err in exc.errors(include_url=False)])

    @classmethod
    def from_request_errors(cls, errors: Sequence[Dict[str, Any]]) -> "InvalidParameters":
        """Translate errors raised before dispatch (e.g. an undecodable JSON body)."""
        return cls([request_error(err) for err in errors])


class ExecutionFailure(RegistryError):
    """A function raised while running. The cause is logged, never returned to the caller."""

    code = 'execution_failed'

    def __init__(self, function_name: str, cause: BaseException):
        super().__init__('Execution failed')
        self.function_name = function_name
        self.cause = cause


# =============================================================================
# FIELD-LEVEL DETAIL
# =============================================================================

def json_kind(value: Any) -> str:
    """Name the JSON kind of a Python value."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int):
        return 'integer'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, (list, tuple)):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__


def schema_at(schema: dict, path: Sequence[Any]) -> Optional[dict]:
    """Walk a rendered object schema along an error location."""
    node: Optional[dict] = schema
    for part in path:
        if node is None:
            return None
        if isinstance(part, int):
            node = node.get('items')
        else:
            node = node.get('properties', {}).get(part)
    return node


def field_error(err: Dict[str, Any], schema: dict) -> Dict[str, Any]:
    """Build one detail entry: where, what was expected, what was received."""
    path = list(err.get('loc', ()))
    node = schema_at(schema, path)
    missing = err.get('type') == 'missing'

    detail: Dict[str, Any] = {
        'field': '.'.join(str(part) for part in path) if path else '<root>',
        'path': path,
        'code': err.get('type'),
        'message': err.get('msg'),
        'expected': node.get('type') if node else None,
    }
    if node and 'enum' in node:
        detail['allowed'] = list(node['enum'])
    if missing:
        detail['received'] = None
        detail['receivedType'] = 'missing'
    else:
        received = err.get('input')
        detail['received'] = received if json_kind(received) in _JSON_KINDS else repr(received)
        detail['receivedType'] = json_kind(received)
    return detail


def request_error(err: Dict[str, Any]) -> Dict[str, Any]:
    """Detail entry for a request that could not be read as JSON parameters."""
    # loc is ('body', <char offset>) for decode errors; only named parts are fields
    path = [part for part in err.get('loc', ())[1:] if isinstance(part, str)]
    message = err.get('msg')
    reason = (err.get('ctx') or {}).get('error')
    if reason:
        message = f"{message}: {reason}"

    if err.get('type') == 'json_invalid':
        received, received_type = None, 'invalid_json'
    else:
        received, received_type = err.get('input'), json_kind(err.get('input'))
    return {
        'field': '.'.join(path) if path else '<root>',
        'path': path,
        'code': err.get('type'),
        'message': message,
        'expected': 'object',
        'received': received if json_kind(received) in _JSON_KINDS else repr(received),
        'receivedType': received_type,
    }


_JSON_KINDS = {'null', 'boolean', 'integer', 'number', 'string', 'array', 'object'}
