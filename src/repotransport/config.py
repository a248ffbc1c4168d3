"""
Configuration helpers for repotransport.

Values are resolved from an explicit configuration mapping first, then from
``REPOTRANSPORT_*`` environment variables, then from a default.
"""

import os
from typing import Any, Dict, Optional

ENV_PREFIX = "REPOTRANSPORT_"

_TRUE_VALUES = ("true", "1", "yes", "y", "t", "on")


def get_env_config(key: str) -> Optional[str]:
    """
    Get a configuration value from the environment.

    Args:
        key: The configuration key, e.g. ``load_plugins``

    Returns:
        The raw string value of ``REPOTRANSPORT_<KEY>``, or None if unset
    """
    return os.environ.get(f"{ENV_PREFIX}{key.upper()}")


def merge_configs(*configs: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge configuration mappings, later ones taking precedence.

    Args:
        *configs: Configuration mappings; None entries are skipped

    Returns:
        A new merged dictionary
    """
    result: Dict[str, Any] = {}
    for config in configs:
        if config:
            result.update(config)
    return result


def get_config(key: str, config: Optional[Dict[str, Any]] = None, default: Any = None) -> Any:
    """Resolve ``key`` from ``config``, then the environment, then ``default``."""
    if config and key in config:
        return config[key]

    env_value = get_env_config(key)
    if env_value is not None:
        return env_value

    return default


def as_bool(value: Any) -> bool:
    """Interpret a configuration value as a boolean."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)
