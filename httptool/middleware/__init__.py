"""Middleware chain for composable request handling.

Handlers serve one request and return ``None`` or an error. Middleware
wraps a handler and returns a new one, so layers can inspect the request
on the way in and the result on the way out.

Public API
----------
- :class:`Handler` / :class:`HandlerFunc`: Handler protocol and function adapter
- :data:`Middleware`: ``Handler -> Handler``
- :func:`chain` / :func:`chain_func`: Compose middleware around a handler
- :func:`recovery_handler` / :func:`recovery_middleware`: Exception safety net
- :func:`with_headers`, :func:`request_id_middleware`, :func:`access_log_middleware`: Built-in layers
"""

from httptool.middleware.chain import (
    Handler,
    HandlerCallable,
    HandlerFunc,
    Middleware,
    chain,
    chain_func,
)
from httptool.middleware.recovery import Logger, recovery_handler, recovery_middleware
from httptool.middleware.access_log import access_log_middleware
from httptool.middleware.headers import with_headers
from httptool.middleware.request_id import request_id_middleware

__all__ = [
    "Handler",
    "HandlerCallable",
    "HandlerFunc",
    "Logger",
    "Middleware",
    "access_log_middleware",
    "chain",
    "chain_func",
    "recovery_handler",
    "recovery_middleware",
    "request_id_middleware",
    "with_headers",
]
