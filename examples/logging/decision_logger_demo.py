#!/usr/bin/env python3
"""
DecisionLogger demo.

Run:
  python examples/logging/decision_logger_demo.py

Emits one JSON line per decision via the 'aclx.audit' logger.
"""

import logging

from aclx import Acl
from aclx.logging.decision_logger import DecisionLogger


def setup_logging() -> None:
    """Configure logging so 'aclx.audit' emits to stdout."""
    root = logging.getLogger()
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(h)
    root.setLevel(logging.INFO)


def main() -> None:
    setup_logging()
    acl = Acl(decision_logger=DecisionLogger(as_json=True))
    acl.permit(principal="u1", securable="doc:42", action="read")
    acl.deny(principal="u1", securable="doc:42", action="delete")

    acl.permits("u1", "read", "doc:42")
    acl.permits("u1", ["read", "delete"], "doc:42")
    acl.denies("u2", "read", "doc:42")


if __name__ == "__main__":
    main()
