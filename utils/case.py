"""
Shared case conversion for API request/response normalization.

Database rows use snake_case column names; API responses use camelCase.
The converters walk nested dicts and lists and rename every dict key,
leaving values (strings, numbers, dates, unknown objects) untouched.

Key collisions are not guarded: if two keys of one dict rename to the same
target (e.g. ``totalSeats`` and ``total_Seats`` both become ``totalSeats``),
the key that comes last in iteration order wins. Round trips are not exact
either: ``price_child_6_10`` camelizes to ``priceChild_6_10``.
"""
import re
from datetime import date, datetime, time
from typing import Any, Callable

_UNDERSCORE_LOWER = re.compile(r"_([a-z])")
_UPPER = re.compile(r"[A-Z]")

# Returned as-is; date/time values are never treated as containers.
_OPAQUE_TYPES = (str, bytes, int, float, bool, datetime, date, time)


def to_camel_key(s: str) -> str:
    """Convert a single snake_case key to camelCase (``_x`` -> ``X``)."""
    return _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), s)


def to_snake_key(s: str) -> str:
    """Convert a single camelCase key to snake_case (``X`` -> ``_x``)."""
    return _UPPER.sub(lambda m: "_" + m.group(0).lower(), s)


def _convert_keys(obj: Any, rename: Callable[[str], str]) -> Any:
    if obj is None or isinstance(obj, _OPAQUE_TYPES):
        return obj
    if isinstance(obj, dict):
        out = {}
        for k, v in obj.items():
            new_k = rename(k) if isinstance(k, str) else k
            out[new_k] = _convert_keys(v, rename)
        return out
    if isinstance(obj, list):
        return [_convert_keys(x, rename) for x in obj]
    if isinstance(obj, tuple):
        return tuple(_convert_keys(x, rename) for x in obj)
    return obj


def dict_keys_to_camel(obj: Any) -> Any:
    """Recursively convert dict keys from snake_case to camelCase for API responses."""
    return _convert_keys(obj, to_camel_key)


def dict_keys_to_snake(obj: Any) -> Any:
    """Recursively convert dict keys from camelCase to snake_case for API input normalization."""
    return _convert_keys(obj, to_snake_key)
