"""
Function-Calling Endpoints

- GET  /api/functions             -> schemas for every registered function
- POST /api/query/{functionName}  -> invoke one function
- POST /api/batch                 -> invoke many, independently

Status codes keep the three outcomes apart: 404 unknown function,
400 invalid parameters, 200 for any successful call (even a null result).
"""

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from registry import registry, FunctionNotFound, InvalidParameters, ExecutionFailure

functions_router = APIRouter()


STATUS_BY_ERROR = {
    FunctionNotFound.code: 404,
    InvalidParameters.code: 400,
    ExecutionFailure.code: 500,
}


@functions_router.get("/api/functions")
def list_functions():
    """Function definitions in the shape LLM function-calling APIs expect."""
    return JSONResponse({"functions": registry.introspect()})


@functions_router.post("/api/query/{function_name}")
def query_function(function_name: str, params: Any = Body(None)):
    """Validate the JSON body against the function's schema and run it."""
    outcome = registry.invoke(function_name, params)
    if outcome.success:
        return JSONResponse({"result": outcome.result})

    status = STATUS_BY_ERROR.get(outcome.error_type, 500)
    if status == 404:
        print(f"[API] Unknown function requested: {function_name}")
    return JSONResponse(outcome.error.to_dict(), status_code=status)


@functions_router.post("/api/batch")
def batch_query(payload: Any = Body(None)):
    """
    Run several queries in one request.

    Items are attempted independently and reported in input order; a failed
    item does not undo or block the others.
    """
    queries = payload.get("queries") if isinstance(payload, dict) else None
    if not isinstance(queries, list):
        return JSONResponse({"error": "queries must be an array"}, status_code=400)

    outcomes = registry.invoke_batch(queries)
    failed = sum(1 for outcome in outcomes if not outcome.success)
    if failed:
        print(f"[API] Batch of {len(outcomes)}: {failed} failed")
    return JSONResponse({"results": [outcome.to_dict() for outcome in outcomes]})
