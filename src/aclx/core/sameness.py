from __future__ import annotations

from typing import Any

from .model import UNSET

_ID_FIELDS = ("_id", "id")


def _surrogate(obj: Any, field: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(field, UNSET)
    return getattr(obj, field, UNSET)


def _is_empty(value: Any) -> bool:
    return value is UNSET or value is None or value == ""


def _identifies(obj: Any, other: Any) -> bool:
    fn = getattr(obj, "identifies", None)
    return callable(fn) and bool(fn(other))


def is_same(that: Any, other: Any) -> bool:
    """Return True if *that* and *other* denote the same thing.

    Two values are the same when they are the same object or compare equal,
    when both carry an equal non-empty ``_id`` (then ``id``) surrogate key as
    an attribute or mapping key, or when either one's ``identifies()``
    accepts the other.
    """
    if that is other:
        return True
    if that is UNSET or other is UNSET:
        return False
    if that == other:
        return True
    for field in _ID_FIELDS:
        mine = _surrogate(that, field)
        if _is_empty(mine):
            continue
        if mine == _surrogate(other, field):
            return True
    return _identifies(that, other) or _identifies(other, that)


DEFAULT_SAMENESS_TESTER = is_same
