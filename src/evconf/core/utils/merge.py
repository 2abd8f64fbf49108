"""Deep merge used to layer configuration documents.

Nested dictionaries are merged recursively; lists and scalars from the
override replace the base value. A list whose first element is "+" is
appended to the base list instead.
"""
from __future__ import annotations

from typing import Any, Dict, List


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = _merge_lists(current, value)
        else:
            result[key] = value
    return result


def _merge_lists(base: List[Any], override: List[Any]) -> List[Any]:
    if override and override[0] == "+":
        return [*base, *override[1:]]
    return list(override)


__all__ = ["deep_merge"]
