"""
SciVal LLM Data Layer - Function-calling API over scholarly analytics

Exposes six read-only queries (entity lookup, search, metrics, comparison,
trend, top-N) through a schema-validated registry that LLM agents can
discover and call generically.

Endpoints:
- GET  /api/functions             function definitions for LLM tool use
- POST /api/query/{functionName}  single invocation
- POST /api/batch                 independent batch invocation
- POST /api/chat                  keyword-based query suggestions
- GET  /health, /api/status
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import config
from data import dataset
from registry import registry, InvalidParameters
from api import functions_router, chat_router, health_router


# =============================================================================
# APP INITIALIZATION
# =============================================================================

app = FastAPI(
    title="SciVal LLM Data Layer",
    description="Schema-validated analytics queries for language-model agents",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(functions_router)
app.include_router(chat_router)
app.include_router(health_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Bodies that never reach the registry (e.g. malformed JSON) still get the registry's 400 shape."""
    print(f"[API] Rejected request body on {request.method} {request.url.path}")
    error = InvalidParameters.from_request_errors(exc.errors())
    return JSONResponse(status_code=400, content=error.to_dict())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    print("=" * 60)
    print(f"UNHANDLED EXCEPTION on {request.method} {request.url.path}:")
    print("=" * 60)
    traceback.print_exception(type(exc), exc, exc.__traceback__)
    print("=" * 60)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "type": type(exc).__name__}
    )


# =============================================================================
# STARTUP
# =============================================================================

@app.on_event("startup")
async def startup():
    """Log what is being served."""
    print("=" * 60)
    print("SciVal LLM Data Layer Starting Up")
    print("=" * 60)

    stats = dataset.stats()
    print("Dataset:")
    for kind, count in stats.items():
        print(f"  {kind}: {count}")

    print("-" * 60)
    print(f"Functions ({len(registry)}):")
    for name in registry.names():
        print(f"  {name}")

    print("-" * 60)
    print(f"Function definitions: http://localhost:{config.port}/api/functions")
    print("=" * 60)
    print("Ready to serve requests")
    print("=" * 60)


# =============================================================================
# RUN
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
    )
