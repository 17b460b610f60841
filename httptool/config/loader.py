"""Configuration file loading and validation.

Loads a YAML configuration file, expands ``${ENV_VAR}`` placeholders,
and validates against the Pydantic models defined in :mod:`schema`.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from httptool.config.env import expand_env_vars
from httptool.config.schema import HttptoolConfig
from httptool.constants import CONFIG_ENV_VAR
from httptool.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Recognised config file extensions.
_YAML_EXTS = frozenset({".yaml", ".yml"})

# Config file search order (first match wins)
_CONFIG_SEARCH_ORDER = ("config.yaml", "config.yml")


def _read_config_file(cfg_fpath: str) -> Dict[str, Any]:
    """Read and parse a YAML config file from *cfg_fpath*.

    Raises :class:`ConfigurationError` on I/O or parse errors.
    """
    ext = os.path.splitext(cfg_fpath)[1].lower()
    if ext not in _YAML_EXTS:
        raise ConfigurationError(
            f"Unsupported config file extension '{ext}'. "
            "Only YAML files (.yaml, .yml) are supported."
        )

    try:
        with open(cfg_fpath, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)
    except Exception as exc:
        raise ConfigurationError(f"Error reading configuration file: {cfg_fpath}\n  {exc}") from exc

    if not isinstance(raw_data, dict):
        raise ConfigurationError(
            "Top-level configuration content must be a YAML mapping (dictionary)."
        )
    return raw_data


def _format_validation_errors(exc: ValidationError) -> str:
    """Format Pydantic validation errors into a readable multi-line string."""
    lines: List[str] = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        lines.append(f"  • {loc}: {err['msg']}")
    return "\n".join(lines)


def find_config_file(explicit: Optional[str] = None) -> Optional[str]:
    """Resolve the config path: *explicit* → ``HTTPTOOL_CONFIG`` → CWD search.

    Returns ``None`` when nothing is configured and no file is found, in
    which case callers fall back to defaults.
    """
    if explicit:
        return explicit
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return env_path
    for name in _CONFIG_SEARCH_ORDER:
        candidate = os.path.join(os.getcwd(), name)
        if os.path.isfile(candidate):
            return candidate
    return None


def load_config(cfg_fpath: str) -> HttptoolConfig:
    """Load, expand and validate the config file at *cfg_fpath*.

    Raises:
        ConfigurationError: On file I/O errors, parse errors, or
            validation failures (all errors reported at once).
    """
    logger.debug("Loading configuration file: %s", cfg_fpath)

    if not os.path.exists(cfg_fpath):
        raise ConfigurationError(f"Configuration file does not exist: {cfg_fpath}")

    raw_data = _read_config_file(cfg_fpath)

    raw_data = expand_env_vars(raw_data)

    try:
        config = HttptoolConfig.model_validate(raw_data)
    except ValidationError as exc:
        error_summary = _format_validation_errors(exc)
        raise ConfigurationError(
            f"Configuration validation failed ({len(exc.errors())} error(s)):\n" f"{error_summary}"
        ) from exc

    logger.info("Configuration '%s' loaded (v%s).", cfg_fpath, config.version)
    return config
