"""Validation error types.

The kernel has exactly one error kind, :class:`Invalid`, carrying the
formatted ``"<name>: <token>"`` message. Domain errors absorb it through
:class:`FromInvalid` and :func:`lift_invalid`.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Self

from eventric.const import ERROR_PREFIX


class ValidationError(ValueError):
    """Base class for kernel validation errors."""


class Invalid(ValidationError):
    """A value failed one of its validators.

    Renders as ``"Validation Error: <name>: <token>"``. Two errors are equal
    when they carry the same message, so expected errors can be compared
    directly in tests.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{ERROR_PREFIX}{self.message}"

    def __repr__(self) -> str:
        return f"Invalid({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Invalid):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((Invalid, self.message))


class FromInvalid(Exception):
    """Mixin for domain errors that can be built from a kernel error.

    Subclasses may override :meth:`from_invalid` when their constructor
    takes something other than a single message.
    """

    @classmethod
    def from_invalid(cls, error: Invalid) -> Self:
        return cls(error.message)


@contextmanager
def lift_invalid(error_type: type[FromInvalid]) -> Iterator[None]:
    """Convert kernel errors raised in the block into a domain error.

    Args:
        error_type: Domain error class implementing ``from_invalid``

    Raises:
        error_type: When an :class:`Invalid` is raised inside the block,
            chained to the original error
    """
    try:
        yield
    except Invalid as e:
        raise error_type.from_invalid(e) from e
