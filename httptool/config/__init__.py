"""Configuration loading and validation for httptool."""

from httptool.config.loader import find_config_file, load_config
from httptool.config.env import expand_env_vars
from httptool.config.schema import (
    AccessLogSettings,
    HttptoolConfig,
    MiddlewareSettings,
    RecoverySettings,
    RequestIdSettings,
    ServerSettings,
)

__all__ = [
    "AccessLogSettings",
    "HttptoolConfig",
    "MiddlewareSettings",
    "RecoverySettings",
    "RequestIdSettings",
    "ServerSettings",
    "expand_env_vars",
    "find_config_file",
    "load_config",
]
