"""Validators which apply to fixed-size arrays.

In Python these are tuples, and ``array.array`` buffers used as
fixed-length arrays.
"""

from array import array
from typing import Any

from eventric.const import EMPTY


class IsEmpty:
    """Validates that a fixed-size array has a non-zero length."""

    def validate(self, value: tuple[Any, ...] | array) -> str | None:
        return EMPTY if len(value) == 0 else None
