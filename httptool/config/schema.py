"""Pydantic configuration models for httptool.

Defines the validated config structure using the versioned v1 format.
"""

from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, Field, field_validator

from httptool.constants import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    REQUEST_ID_HEADER,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ServerSettings(BaseModel):
    """Listener and logging settings for ``httptool serve``."""

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Python logging level name.")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class RecoverySettings(BaseModel):
    """Recovery boundary around every route."""

    enabled: bool = True


class AccessLogSettings(BaseModel):
    """One log line per request."""

    enabled: bool = True


class RequestIdSettings(BaseModel):
    """Request ID tagging."""

    enabled: bool = True
    header: str = Field(default=REQUEST_ID_HEADER, min_length=1)


class MiddlewareSettings(BaseModel):
    """Which built-in middleware wraps the application's routes."""

    recovery: RecoverySettings = Field(default_factory=RecoverySettings)
    access_log: AccessLogSettings = Field(default_factory=AccessLogSettings)
    request_id: RequestIdSettings = Field(default_factory=RequestIdSettings)
    response_headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Fixed headers added to every response.",
    )


class HttptoolConfig(BaseModel):
    """Top-level configuration file model."""

    version: Literal["1"] = "1"
    server: ServerSettings = Field(default_factory=ServerSettings)
    middleware: MiddlewareSettings = Field(default_factory=MiddlewareSettings)
