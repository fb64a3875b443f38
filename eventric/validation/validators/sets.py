"""Validators which apply to unordered sets.

Covers ``set``, ``frozenset``, dict key views and any other
``collections.abc.Set``, hash-based or ordered.
"""

from collections.abc import Set
from typing import Any

from eventric.const import EMPTY


class IsEmpty:
    """Validates that a set is not empty."""

    def validate(self, value: Set[Any]) -> str | None:
        return EMPTY if len(value) == 0 else None
