"""
httptool - composable HTTP handlers with middleware chaining and fault recovery.

Handlers return an explicit error instead of relying on side effects,
middleware wraps handlers in onion order, and the recovery boundary turns
any exception raised inside a chain into a logged, generic 500 response.
"""

from httptool.constants import SERVER_NAME, SERVER_VERSION
from httptool.errors import HTTPError
from httptool.middleware import (
    Handler,
    HandlerFunc,
    Logger,
    Middleware,
    chain,
    chain_func,
    recovery_handler,
    recovery_middleware,
)
from httptool.server import ResponseWriter, as_endpoint, http_error

__version__ = SERVER_VERSION
__app_name__ = SERVER_NAME

__all__ = [
    "HTTPError",
    "Handler",
    "HandlerFunc",
    "Logger",
    "Middleware",
    "ResponseWriter",
    "SERVER_NAME",
    "SERVER_VERSION",
    "__app_name__",
    "__version__",
    "as_endpoint",
    "chain",
    "chain_func",
    "http_error",
    "recovery_handler",
    "recovery_middleware",
]
