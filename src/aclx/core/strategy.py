from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from .model import AccessTuple

DecisionFn = Callable[[AccessTuple, Any], bool]


class StaticStrategy(Enum):
    """Declarative strategies whose answer does not depend on the tuple."""

    PERMIT = "permit"
    DENY = "deny"

    def permits(self, access: AccessTuple, data: Any = None) -> bool:
        return self is StaticStrategy.PERMIT

    def denies(self, access: AccessTuple, data: Any = None) -> bool:
        return self is StaticStrategy.DENY


PERMIT = StaticStrategy.PERMIT
DENY = StaticStrategy.DENY


class CallbackStrategy:
    """Algorithmic strategy built from two plain functions.

    Each function receives ``(access, data)``. A missing function answers False,
    so ``CallbackStrategy(denies=...)`` only ever vetoes and never permits.
    """

    __slots__ = ("_permits", "_denies", "name")

    def __init__(
        self,
        permits: Optional[DecisionFn] = None,
        denies: Optional[DecisionFn] = None,
        *,
        name: str | None = None,
    ) -> None:
        self._permits = permits
        self._denies = denies
        self.name = name

    def permits(self, access: AccessTuple, data: Any = None) -> bool:
        if self._permits is None:
            return False
        return bool(self._permits(access, data))

    def denies(self, access: AccessTuple, data: Any = None) -> bool:
        if self._denies is None:
            return False
        return bool(self._denies(access, data))

    def __repr__(self) -> str:
        return f"CallbackStrategy(name={self.name!r})"
