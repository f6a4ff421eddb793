from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from .model import AccessTuple

SamenessTester = Callable[[Any, Any], bool]


@runtime_checkable
class AccessControlStrategy(Protocol):
    """Decides permission and explicit denial for one access tuple.

    ``data`` is optional caller-supplied context passed through unchanged
    from the decision call.
    """

    def permits(self, access: AccessTuple, data: Any = None) -> bool: ...

    def denies(self, access: AccessTuple, data: Any = None) -> bool: ...


class MetricsSink(Protocol):
    def inc(self, name: str, labels: Optional[Dict[str, str]] = None) -> None: ...


@runtime_checkable
class MetricsObserve(Protocol):
    def observe(self, name: str, value: float, labels: Optional[Dict[str, str]] = None) -> None: ...


class DecisionLogSink(Protocol):
    def log(self, payload: Dict[str, Any]) -> None: ...
