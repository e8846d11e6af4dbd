"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries without modifying either.

    - Objects are merged recursively.
    - Scalars and arrays in 'update' replace those in 'base'.
    """
    result = {
        k: deep_merge(v, {}) if isinstance(v, dict) else v for k, v in base.items()
    }
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
