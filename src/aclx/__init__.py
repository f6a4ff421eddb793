from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version
except Exception:  # pragma: no cover
    PackageNotFoundError = Exception  # type: ignore[assignment,misc]
    version = None  # type: ignore[assignment]

from . import core, logging, metrics
from .core import (
    DENY,
    PERMIT,
    UNSET,
    AccessControlStrategy,
    AccessTuple,
    Ace,
    Acl,
    AclError,
    CallbackStrategy,
    InvalidStrategyError,
    PrimitiveAction,
    StaticStrategy,
    is_same,
)
from .logging import DecisionLogger


def _detect_version() -> str:
    if version is None:
        return "0.1.0"
    try:
        return version("aclx")
    except PackageNotFoundError:
        return "0.1.0"


__version__ = _detect_version()

__all__ = [
    "Ace",
    "Acl",
    "AccessTuple",
    "AccessControlStrategy",
    "AclError",
    "CallbackStrategy",
    "DecisionLogger",
    "DENY",
    "InvalidStrategyError",
    "PERMIT",
    "PrimitiveAction",
    "StaticStrategy",
    "UNSET",
    "core",
    "is_same",
    "logging",
    "metrics",
    "__version__",
]
