"""``${VAR}`` / ``${VAR:-default}`` expansion for configuration values."""

from __future__ import annotations

import os
import re
from typing import Any, Mapping, Optional

# ${NAME} or ${NAME:-fallback}
_ENV_VAR_RE = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def _substitute(text: str, environ: Mapping[str, str]) -> str:
    def repl(m: "re.Match[str]") -> str:
        name, fallback = m.group(1), m.group(2)
        value = environ.get(name)
        if not value and fallback is not None:
            return fallback
        if value is None:
            return m.group(0)
        return value

    return _ENV_VAR_RE.sub(repl, text)


def expand_env_vars(value: Any, environ: Optional[Mapping[str, str]] = None) -> Any:
    """Recursively expand environment references in string values.

    ``${VAR}`` is replaced by the variable's value and left unchanged when
    unset. ``${VAR:-text}`` falls back to ``text`` when the variable is
    unset or empty. Mapping keys and non-string leaves are not touched.
    """
    env = os.environ if environ is None else environ
    if isinstance(value, str):
        return _substitute(value, env)
    if isinstance(value, dict):
        return {k: expand_env_vars(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item, env) for item in value]
    return value
