"""Adapter that plugs a :class:`~httptool.middleware.chain.Handler` into Starlette.

Starlette endpoints take a request and return a response. The adapter
creates a :class:`ResponseWriter`, awaits the handler, hands any
*returned* error to an error handler, and renders the writer. Raised
exceptions are not caught here; wrap the handler with the recovery
boundary for that.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from starlette.requests import Request
from starlette.responses import Response

from httptool.errors import HTTPError
from httptool.server.response import ResponseWriter, http_error
from httptool.status import status_text

if TYPE_CHECKING:
    from httptool.middleware.chain import Handler

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[Request, ResponseWriter, Exception], None]


def default_error_handler(request: Request, writer: ResponseWriter, err: Exception) -> None:
    """Render a returned error.

    :class:`HTTPError` keeps its status and detail; anything else becomes
    a generic 500 so internal messages never reach the client.
    """
    if isinstance(err, HTTPError):
        logger.info(
            "%s %s returned HTTP %d: %s",
            request.method,
            request.url.path,
            err.status_code,
            err.detail,
        )
        http_error(writer, err.detail, err.status_code)
        return

    logger.error(
        "%s %s returned error (%s): %s",
        request.method,
        request.url.path,
        type(err).__name__,
        err,
    )
    http_error(writer, status_text(500), 500)


def as_endpoint(
    handler: Handler,
    error_handler: Optional[ErrorHandler] = None,
) -> Callable[[Request], Awaitable[Response]]:
    """Wrap *handler* as an async Starlette endpoint.

    Args:
        handler: The (usually chained) handler to serve.
        error_handler: Called with ``(request, writer, err)`` when the
            handler returns an error. Defaults to
            :func:`default_error_handler`.

    Returns:
        An async callable ``(Request) -> Response`` for ``Route(endpoint=...)``.
    """
    on_error = error_handler or default_error_handler

    async def endpoint(request: Request) -> Response:
        writer = ResponseWriter()
        err = await handler(request, writer)
        if err is not None:
            on_error(request, writer, err)
        return writer.to_response()

    return endpoint
