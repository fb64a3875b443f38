"""Validation result types.

This module defines a structured result for one field's validation, so
callers that validate several fields can collect outcomes instead of
stopping at the first raised error.
"""

from dataclasses import dataclass

from eventric.validation.errors import Invalid


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of validating a single field.

    ``message`` is the kernel message (``"<name>: <token>"``) on failure and
    an empty string on success.
    """

    success: bool
    message: str
    field_name: str

    @classmethod
    def ok(cls, field_name: str) -> "ValidationResult":
        return cls(True, "", field_name)

    @classmethod
    def from_error(cls, field_name: str, error: Invalid) -> "ValidationResult":
        return cls(False, error.message, field_name)

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.success

    @property
    def error(self) -> Invalid | None:
        """The kernel error for a failed result, rebuilt from its message."""
        if self.success:
            return None
        return Invalid(self.message)

    def format_error(self) -> str:
        """Format the rendered error.

        Returns empty string if validation succeeded.
        """
        if self.success:
            return ""
        return str(Invalid(self.message))
