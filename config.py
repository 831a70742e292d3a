"""
SciVal Data Layer - Centralized Configuration

All environment variables and settings in one place.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


@dataclass
class Config:
    """Application configuration loaded from environment."""

    # Server
    port: int = 3000
    host: str = "0.0.0.0"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])

    # LLM settings (tool-use client and demos only)
    anthropic_api_key: Optional[str] = None
    default_model: str = "claude-sonnet-4-20250514"
    max_tool_iterations: int = 5

    # Base URL the demo clients talk to
    api_base: Optional[str] = None

    def __post_init__(self):
        if self.api_base is None:
            self.api_base = f"http://localhost:{self.port}"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        port = int(os.environ.get('PORT', 3000))
        cors_raw = os.environ.get('CORS_ORIGINS')

        kwargs = dict(
            port=port,
            host=os.environ.get('HOST', '0.0.0.0'),
            anthropic_api_key=os.environ.get('ANTHROPIC_API_KEY'),
            default_model=os.environ.get('ANTHROPIC_MODEL', cls.default_model),
            max_tool_iterations=int(os.environ.get('MAX_TOOL_ITERATIONS', 5)),
            api_base=os.environ.get('DATA_LAYER_API_BASE'),
        )
        if cors_raw:
            kwargs['cors_origins'] = _split_origins(cors_raw)
        return cls(**kwargs)


# Global config instance
config = Config.from_env()

