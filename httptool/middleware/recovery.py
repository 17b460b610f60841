"""Recovery boundary: exception safety net.

Catches any exception raised by downstream middleware or the final
handler, logs it once, and replaces the response with a generic 500 so
the client always gets a well-formed reply and the host never sees the
exception.

Returned errors are a different failure class: they pass through
untouched and are not logged here.

``asyncio.CancelledError`` raised by a handler (for example from awaiting
an already cancelled future) is treated as a fault. Cancellation of the
running task itself still propagates so the host can tear the request down.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Protocol

from httptool.middleware.chain import Handler, Middleware
from httptool.server.response import ResponseWriter, http_error
from httptool.status import status_text

logger = logging.getLogger(__name__)


class Logger(Protocol):
    """Minimal diagnostic sink; a :class:`logging.Logger` qualifies.

    Shared by every in-flight request, so implementations must be safe to
    call concurrently.
    """

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


def _describe(request: Any) -> str:
    method = getattr(request, "method", "?")
    url = getattr(request, "url", None)
    path = getattr(url, "path", "?")
    return f"{method} {path}"


def _task_cancelling() -> bool:
    """True when the running asyncio task has a pending cancel request."""
    try:
        task = asyncio.current_task()
    except RuntimeError:
        # Not running under an asyncio loop.
        return False
    return task is not None and task.cancelling() > 0


def recovery_handler(next_handler: Handler, log: Optional[Logger] = None) -> Handler:
    """Wrap *next_handler* so that any exception it raises becomes a 500.

    Args:
        next_handler: The handler to protect.
        log: Where the diagnostic goes. Defaults to this module's logger.

    Returns:
        A handler that returns whatever *next_handler* returns, or ``None``
        after recovering from a raised exception.
    """
    sink: Logger = log if log is not None else logger

    def _recover(request: Any, writer: ResponseWriter, exc: BaseException) -> None:
        sink.error(
            "Recovered from %s in %s: %s",
            type(exc).__name__,
            _describe(request),
            exc,
            exc_info=True,
        )
        # Fault details go to the log only, never to the client.
        http_error(writer, status_text(500), 500)

    async def recovered(request: Any, writer: ResponseWriter) -> Optional[Exception]:
        try:
            return await next_handler(request, writer)
        except asyncio.CancelledError as exc:
            # Only a cancellation aimed at this task is allowed through.
            if _task_cancelling():
                raise
            _recover(request, writer, exc)
            return None
        except Exception as exc:
            _recover(request, writer, exc)
            return None

    return recovered


def recovery_middleware(log: Optional[Logger] = None) -> Middleware:
    """Return the recovery boundary as a middleware for :func:`chain`.

    Everything listed after it is covered; layers before it see the recovered 500.
    """

    def middleware(next_handler: Handler) -> Handler:
        return recovery_handler(next_handler, log)

    return middleware
