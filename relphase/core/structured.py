"""Helpers for safely working with dynamic (untyped) structures.

Use these at boundaries where we ingest JSON (webhook payloads, REST
responses) or TOML. They provide runtime validation and static type narrowing.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def is_obj_list(obj: object) -> TypeGuard[ObjList]:
    """Return True if obj is a list."""
    return isinstance(obj, list)


def as_obj_list(obj: object) -> ObjList | None:
    """Return obj as ObjList if it matches, else None."""
    if is_obj_list(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_raw_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value exactly as stored (no stripping, empty kept).

    Use for values compared verbatim, such as branch refs and timestamps.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    return value


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an int value from a mapping (bools are rejected)."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a bool value from a mapping."""
    value = table.get(key)
    if not isinstance(value, bool):
        return None
    return value


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    value = table.get(key)
    return as_str_dict(value)

