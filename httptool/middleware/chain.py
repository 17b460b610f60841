"""Core handler and middleware chain infrastructure.

Defines the handler protocol, the function adapter, and the chain
builder that composes middleware around a terminal handler.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Protocol

from httptool.server.response import ResponseWriter

# ── Type protocol ────────────────────────────────────────────────────────


class Handler(Protocol):
    """Async callable that serves one request.

    Returns ``None`` on success or an exception instance describing an
    expected failure. Raising is reserved for faults.
    """

    async def __call__(self, request: Any, writer: ResponseWriter) -> Optional[Exception]: ...


HandlerCallable = Callable[[Any, ResponseWriter], Awaitable[Optional[Exception]]]

# A middleware wraps a handler and returns a new one with the same contract.
Middleware = Callable[[Handler], Handler]


class HandlerFunc:
    """Adapter that lets an ordinary async function be used as a :class:`Handler`.

    Calls are forwarded unchanged and the function's return value is
    passed back as is.
    """

    __slots__ = ("func",)

    def __init__(self, func: HandlerCallable) -> None:
        self.func = func

    async def __call__(self, request: Any, writer: ResponseWriter) -> Optional[Exception]:
        return await self.func(request, writer)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"HandlerFunc({name})"


# ── Chain builder ────────────────────────────────────────────────────────


def chain(next_handler: Handler, *middlewares: Optional[Middleware]) -> Handler:
    """Compose *middlewares* around a final *next_handler*.

    Middleware are applied in argument order: the first one is the
    outermost wrapper (runs first on the way in, last on the way out).
    ``None`` entries are skipped so optional middleware can be switched
    off in place. No handler is invoked here.

    Args:
        next_handler: The innermost handler.
        *middlewares: Callables ``Handler -> Handler``, or ``None``.

    Returns:
        ``middlewares[0](middlewares[1](... (next_handler)))``; with no
        middleware, *next_handler* itself.
    """
    for mw in reversed(middlewares):
        if mw is not None:
            next_handler = mw(next_handler)
    return next_handler


def chain_func(func: HandlerCallable, *middlewares: Optional[Middleware]) -> Handler:
    """Like :func:`chain`, with the terminal handler given as a bare function."""
    return chain(HandlerFunc(func), *middlewares)
