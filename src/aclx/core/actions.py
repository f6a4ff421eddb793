from __future__ import annotations

from enum import Enum


class PrimitiveAction(str, Enum):
    """Common actions. Informational only; any hashable or comparable value may be used."""

    CREATE = "CREATE"
    REFERENCE = "REFERENCE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    SECURE = "SECURE"
