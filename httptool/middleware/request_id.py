"""Request ID middleware.

Reuses the client's request ID header when present, otherwise generates
one, stores it on ``request.state.request_id`` and echoes it back on the
response so log lines and client reports can be correlated.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from httptool.constants import REQUEST_ID_HEADER, REQUEST_ID_LENGTH
from httptool.middleware.chain import Handler, Middleware
from httptool.server.response import ResponseWriter


def new_request_id() -> str:
    return uuid.uuid4().hex[:REQUEST_ID_LENGTH]


def request_id_middleware(header: str = REQUEST_ID_HEADER) -> Middleware:
    """Return a middleware that tags each request with an ID."""

    def middleware(next_handler: Handler) -> Handler:
        async def handler(request: Any, writer: ResponseWriter) -> Optional[Exception]:
            rid = request.headers.get(header) or new_request_id()
            request.state.request_id = rid
            writer.headers[header] = rid
            return await next_handler(request, writer)

        return handler

    return middleware
