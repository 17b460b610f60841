"""Logging configuration setup."""

import copy
import logging.config
import os
import sys
from datetime import datetime
from typing import Tuple

from httptool.constants import LOG_DIR

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

BASE_LOG_CFG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple_file": {
            "format": ("%(asctime)s - %(name)25s:%(lineno)-4d - " "%(levelname)-7s - %(message)s"),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "console": {
            "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            "datefmt": "%H:%M:%S",
        },
    },
    "handlers": {
        "file_handler": {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "simple_file",
            "filename": "temp_log_name.log",
            "encoding": "utf-8",
        },
        "console_handler": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "httptool": {
            "handlers": ["file_handler", "console_handler"],
            "propagate": False,
            "level": "INFO",
        },
        "uvicorn": {
            "handlers": ["file_handler", "console_handler"],
            "propagate": False,
            "level": "INFO",
        },
        "uvicorn.error": {
            "handlers": ["file_handler", "console_handler"],
            "propagate": False,
            "level": "INFO",
        },
        "uvicorn.access": {
            "handlers": ["file_handler"],
            "propagate": False,
            "level": "WARNING",
        },
        "starlette": {
            "handlers": ["file_handler", "console_handler"],
            "propagate": False,
            "level": "INFO",
        },
    },
    "root": {
        "handlers": ["file_handler"],
        "level": "WARNING",
    },
}


def build_log_config(log_lvl_valid: str, log_fpath: str) -> dict:
    """Return a ``dictConfig`` mapping for *log_lvl_valid* writing to *log_fpath*."""
    log_cfg: dict = copy.deepcopy(BASE_LOG_CFG)
    log_cfg["handlers"]["file_handler"]["filename"] = log_fpath
    log_cfg["handlers"]["console_handler"]["level"] = log_lvl_valid

    for name in ("httptool", "uvicorn", "uvicorn.error", "starlette"):
        log_cfg["loggers"][name]["level"] = log_lvl_valid

    log_cfg["loggers"]["uvicorn.access"]["level"] = (
        "INFO" if log_lvl_valid == "DEBUG" else "WARNING"
    )
    log_cfg["root"]["level"] = log_lvl_valid if log_lvl_valid == "DEBUG" else "WARNING"
    return log_cfg


def setup_logging(
    log_lvl_str: str, *, log_dir: str = LOG_DIR, quiet: bool = False
) -> Tuple[str, str]:
    """
    Set up the logging system.

    Uses a timestamped log file under *log_dir* plus a console handler on
    stderr, both at the requested level.

    Args:
        log_lvl_str: The desired log level string (e.g., 'debug', 'info').
        log_dir: Directory for the log file; created if missing.
        quiet: If *True*, suppress the ``print()`` status lines.

    Returns:
        A tuple of (log_file_path, validated_log_level).
    """
    log_lvl_valid = log_lvl_str.upper()
    if log_lvl_valid not in _VALID_LEVELS:
        if not quiet:
            print(f"Warning: invalid log level '{log_lvl_str}'. Using 'INFO'.")
        log_lvl_valid = "INFO"

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    os.makedirs(log_dir, exist_ok=True)
    log_fpath = os.path.join(log_dir, f"httptool_{ts}_{log_lvl_valid}.log")

    try:
        logging.config.dictConfig(build_log_config(log_lvl_valid, log_fpath))
        if not quiet:
            print(
                f"Logging initialized. File log level: {log_lvl_valid}, " f"log file: {log_fpath}"
            )
    except Exception as e_log_cfg:
        if not quiet:
            print(
                f"Error applying logging configuration: {e_log_cfg}",
                file=sys.stderr,
            )

    return log_fpath, log_lvl_valid
