"""CLI argument parsing and main entry point.

* ``httptool serve``: run the Uvicorn server with the configured chain.
* ``httptool check-config``: validate a config file and print a summary.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from httptool.config.loader import find_config_file, load_config
from httptool.config.schema import HttptoolConfig
from httptool.constants import SERVER_NAME, SERVER_VERSION
from httptool.display.logging_config import setup_logging
from httptool.errors import ConfigurationError

module_logger = logging.getLogger(__name__)


def _resolve_config(config_path: Optional[str]) -> HttptoolConfig:
    """Load the config named on the command line, via env var, or in CWD."""
    path = find_config_file(config_path)
    if path is None:
        module_logger.info("No configuration file found; using defaults.")
        return HttptoolConfig()
    return load_config(path)


# ── ``httptool serve`` ──────────────────────────────────────────────────


def _cmd_serve(args: argparse.Namespace) -> int:
    try:
        config = _resolve_config(args.config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    host = args.host or config.server.host
    port = args.port or config.server.port
    log_lvl = args.log_level or config.server.log_level

    _, cfg_log_lvl = setup_logging(log_lvl)
    module_logger.info(
        "---- %s v%s starting on %s:%d (log level: %s) ----",
        SERVER_NAME,
        SERVER_VERSION,
        host,
        port,
        cfg_log_lvl,
    )

    from httptool.server.app import create_app

    application = create_app(config)
    uvicorn_cfg = uvicorn.Config(
        app=application,
        host=host,
        port=port,
        log_config=None,
        log_level=cfg_log_lvl.lower(),
    )
    uvicorn.Server(uvicorn_cfg).run()
    module_logger.info("---- %s stopped ----", SERVER_NAME)
    return 0


# ── ``httptool check-config`` ───────────────────────────────────────────


def _cmd_check_config(args: argparse.Namespace) -> int:
    try:
        config = _resolve_config(args.config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    mw = config.middleware
    print(f"Config OK (version {config.version})")
    print(f"  server:       {config.server.host}:{config.server.port}")
    print(f"  log level:    {config.server.log_level}")
    print(f"  recovery:     {'on' if mw.recovery.enabled else 'off'}")
    print(f"  access log:   {'on' if mw.access_log.enabled else 'off'}")
    print(
        f"  request id:   {mw.request_id.header if mw.request_id.enabled else 'off'}"
    )
    print(f"  headers:      {len(mw.response_headers)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httptool",
        description=f"{SERVER_NAME} v{SERVER_VERSION}: composable HTTP handlers.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {SERVER_VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server.")
    serve.add_argument("--config", help="Path to a YAML config file.")
    serve.add_argument("--host", help="Bind address (overrides config).")
    serve.add_argument("--port", type=int, help="Bind port (overrides config).")
    serve.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (overrides config).",
    )
    serve.set_defaults(func=_cmd_serve)

    check = sub.add_parser("check-config", help="Validate a config file.")
    check.add_argument("--config", help="Path to a YAML config file.")
    check.set_defaults(func=_cmd_check_config)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
