"""Shared constants for httptool."""

SERVER_NAME = "httptool"
SERVER_VERSION = "0.1.0"

# Network defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

# Logging defaults
LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"

# Config discovery
CONFIG_ENV_VAR = "HTTPTOOL_CONFIG"

# Response headers
REQUEST_ID_HEADER = "X-Request-ID"
REQUEST_ID_LENGTH = 12
