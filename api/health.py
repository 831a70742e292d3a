"""
Health Check and Status Endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from data import dataset
from registry import registry

health_router = APIRouter()


@health_router.get("/health")
def health_check():
    """Simple health check endpoint."""
    return JSONResponse({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


@health_router.get("/api/status")
def api_status():
    """What is loaded: registered functions and dataset sizes."""
    return JSONResponse({
        "status": "ok",
        "functions": registry.names(),
        "dataset": dataset.stats(),
    })
