from __future__ import annotations

from typing import Any


class AclError(Exception):
    """Base class for aclx errors."""


class InvalidStrategyError(AclError, TypeError):
    """Raised when an entry is built with a strategy lacking permits()/denies()."""

    def __init__(self, strategy: Any, missing: tuple[str, ...]) -> None:
        self.strategy = strategy
        self.missing = missing
        names = ", ".join(f"{m}()" for m in missing)
        super().__init__(f"invalid strategy given: {strategy!r} has no callable {names}")
