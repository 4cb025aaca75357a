"""Turn ORM rows into plain snake_case dicts, ready for dict_keys_to_camel."""
from typing import Any, Optional

from sqlalchemy import inspect


def row_to_dict(obj: Any, relations: Optional[dict[str, Any]] = None) -> Optional[dict[str, Any]]:
    """
    Copy column attributes of a mapped instance into a dict keyed by column name.

    ``relations`` names related attributes to embed, with a nested mapping for
    their own relations, e.g. ``{"package": {"destination": None}}``.
    Only relations that are already loaded should be listed.
    """
    if obj is None:
        return None
    mapper = inspect(obj).mapper
    out = {attr.key: getattr(obj, attr.key) for attr in mapper.column_attrs}
    for name, nested in (relations or {}).items():
        value = getattr(obj, name)
        if isinstance(value, list):
            out[name] = [row_to_dict(v, nested) for v in value]
        else:
            out[name] = row_to_dict(value, nested)
    return out
