"""Environment variable expansion for configuration values.

Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. References to unset
variables without a default are left untouched.
"""

import os
import re
from typing import Any, Dict

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def _replace(match: "re.Match[str]") -> str:
    braced_name, default, bare_name = match.groups()
    name = braced_name or bare_name
    value = os.environ.get(name)
    if value is not None:
        return value
    if default is not None:
        return default
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in strings, dicts and lists."""
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config)
