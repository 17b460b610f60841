"""Static response headers middleware."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from httptool.middleware.chain import Handler, Middleware
from httptool.server.response import ResponseWriter


def with_headers(headers: Mapping[str, str]) -> Middleware:
    """Return a middleware that sets *headers* before calling the next handler.

    Headers are set on the way in, so they survive a recovered fault
    further down the chain.
    """
    fixed = dict(headers)

    def middleware(next_handler: Handler) -> Handler:
        async def handler(request: Any, writer: ResponseWriter) -> Optional[Exception]:
            for name, value in fixed.items():
                writer.headers[name] = value
            return await next_handler(request, writer)

        return handler

    return middleware
