"""Validators which apply to ordered sequences (lists, deques, ranges)."""

from collections.abc import Sequence
from typing import Any

from eventric.const import EMPTY


class IsEmpty:
    """Validates that a sequence is not empty."""

    def validate(self, value: Sequence[Any]) -> str | None:
        return EMPTY if len(value) == 0 else None
