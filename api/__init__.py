"""API module - FastAPI routers and endpoints."""

from .functions import functions_router
from .chat import chat_router
from .health import health_router

__all__ = ['functions_router', 'chat_router', 'health_router']
