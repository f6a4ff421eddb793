from __future__ import annotations

import json
import logging
import random
from typing import Any, Dict, Optional

from ..core.ports import DecisionLogSink


def _truncate(value: Any, limit: int) -> Any:
    if isinstance(value, str) and len(value) > limit:
        return value[:limit] + "...[truncated]"
    if isinstance(value, dict):
        return {k: _truncate(v, limit) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_truncate(v, limit) for v in value]
    return value


class DecisionLogger(DecisionLogSink):
    """Writes ACL decisions to a standard library logger.

    - ``sample_rate`` in [0, 1]: fraction of decisions that are logged.
    - ``as_json``: render the payload with ``json.dumps`` (non-JSON values via repr);
      otherwise a compact ``key=value`` line.
    - ``max_value_len``: truncate long strings in the payload.
    """

    def __init__(
        self,
        *,
        sample_rate: float = 1.0,
        level: int = logging.INFO,
        as_json: bool = False,
        logger_name: str = "aclx.audit",
        max_value_len: Optional[int] = None,
    ) -> None:
        self.sample_rate = max(0.0, min(1.0, float(sample_rate)))
        self.level = level
        self.as_json = bool(as_json)
        self.max_value_len = max_value_len
        self.logger = logging.getLogger(logger_name)

    def _sampled(self) -> bool:
        if self.sample_rate >= 1.0:
            return True
        if self.sample_rate <= 0.0:
            return False
        return random.random() < self.sample_rate

    def _render(self, payload: Dict[str, Any]) -> str:
        if self.as_json:
            return json.dumps(payload, default=repr, sort_keys=True)
        return "aclx.decision " + " ".join(f"{k}={payload[k]!r}" for k in sorted(payload))

    def log(self, payload: Dict[str, Any]) -> None:
        if not self._sampled():
            return
        if self.max_value_len is not None:
            payload = _truncate(payload, int(self.max_value_len))
        self.logger.log(self.level, self._render(payload))


__all__ = ["DecisionLogger"]
