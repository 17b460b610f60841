"""Access log middleware.

Writes one line per request with method, path, final status and elapsed
time. Requests whose handler returned an error are logged at WARNING;
raised exceptions are logged and re-raised, which only happens when no
recovery layer sits inside this one.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

from httptool.middleware.chain import Handler, Middleware
from httptool.server.response import ResponseWriter

logger = logging.getLogger(__name__)


def access_log_middleware(log: Optional[logging.Logger] = None) -> Middleware:
    """Return a middleware that logs every request passing through it."""
    sink = log if log is not None else logger

    def middleware(next_handler: Handler) -> Handler:
        async def handler(request: Any, writer: ResponseWriter) -> Optional[Exception]:
            start = time.monotonic()
            try:
                err = await next_handler(request, writer)
            except Exception as exc:
                sink.warning(
                    "%s %s raised %s after %.1f ms",
                    request.method,
                    request.url.path,
                    type(exc).__name__,
                    (time.monotonic() - start) * 1000.0,
                )
                raise

            elapsed_ms = (time.monotonic() - start) * 1000.0
            if err is not None:
                sink.warning(
                    "%s %s returned error after %.1f ms: %s",
                    request.method,
                    request.url.path,
                    elapsed_ms,
                    err,
                )
            else:
                sink.info(
                    "%s %s -> %d (%.1f ms)",
                    request.method,
                    request.url.path,
                    writer.status_code,
                    elapsed_ms,
                )
            return err

        return handler

    return middleware
