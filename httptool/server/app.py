"""Starlette ASGI application factory.

Every route is a :class:`~httptool.middleware.chain.Handler` wrapped with
the configured middleware and adapted with
:func:`~httptool.server.endpoint.as_endpoint`.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from starlette.applications import Starlette
from starlette.routing import Route

from httptool.config.schema import HttptoolConfig
from httptool.constants import SERVER_NAME, SERVER_VERSION
from httptool.middleware import (
    Handler,
    HandlerFunc,
    Middleware,
    access_log_middleware,
    chain,
    recovery_middleware,
    request_id_middleware,
    with_headers,
)
from httptool.server.endpoint import as_endpoint
from httptool.server.response import ResponseWriter

logger = logging.getLogger(__name__)


def _write_json(writer: ResponseWriter, payload: Any, status_code: int = 200) -> None:
    writer.headers["Content-Type"] = "application/json"
    writer.write_header(status_code)
    writer.write(json.dumps(payload))


async def _health(request: Any, writer: ResponseWriter) -> Optional[Exception]:
    _write_json(writer, {"status": "ok"})
    return None


async def _index(request: Any, writer: ResponseWriter) -> Optional[Exception]:
    _write_json(writer, {"name": SERVER_NAME, "version": SERVER_VERSION})
    return None


def build_middlewares(config: HttptoolConfig) -> List[Optional[Middleware]]:
    """Return the middleware list for *config*, outermost first.

    Disabled layers stay in the list as ``None``; :func:`chain` skips them.
    The access log sits outside the recovery boundary so it records the
    final status of a recovered fault.
    """
    mw_cfg = config.middleware
    return [
        access_log_middleware() if mw_cfg.access_log.enabled else None,
        recovery_middleware() if mw_cfg.recovery.enabled else None,
        request_id_middleware(mw_cfg.request_id.header) if mw_cfg.request_id.enabled else None,
        with_headers(mw_cfg.response_headers) if mw_cfg.response_headers else None,
    ]


def create_app(
    config: Optional[HttptoolConfig] = None,
    handlers: Optional[Mapping[str, Handler]] = None,
) -> Starlette:
    """Create and return the Starlette ASGI application.

    Args:
        config: Validated configuration; defaults when omitted.
        handlers: Extra ``path -> Handler`` routes, served for GET and POST.
            They may override the built-in ``/`` and ``/health`` routes,
            which are GET only.
    """
    config = config or HttptoolConfig()
    middlewares = build_middlewares(config)

    table: Dict[str, Tuple[Handler, List[str]]] = {
        "/": (HandlerFunc(_index), ["GET"]),
        "/health": (HandlerFunc(_health), ["GET"]),
    }
    for path, handler in (handlers or {}).items():
        table[path] = (handler, ["GET", "POST"])

    routes = [
        Route(path, endpoint=as_endpoint(chain(handler, *middlewares)), methods=methods)
        for path, (handler, methods) in table.items()
    ]
    application = Starlette(routes=routes)
    logger.info(
        "Starlette ASGI app '%s' created with %d route(s), %d middleware layer(s).",
        SERVER_NAME,
        len(routes),
        sum(1 for mw in middlewares if mw is not None),
    )
    return application
