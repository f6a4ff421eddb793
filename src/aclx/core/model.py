from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final


class _Unset:
    """Marker for an absent principal, securable or action.

    Absence is a wildcard on entries. ``None``, ``0`` and ``""`` are ordinary
    identifiers and never mean "unset".
    """

    __slots__ = ()
    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: dict) -> "_Unset":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()


def is_unset(value: Any) -> bool:
    return value is UNSET


@dataclass(frozen=True)
class AccessTuple:
    """The (principal, action, securable) triple a strategy decides on."""

    principal: Any = UNSET
    action: Any = UNSET
    securable: Any = UNSET
