"""eventric: a small value-validation kernel.

Describe simple invariants over in-memory values, run an ordered battery of
them against a value, and get back either success or the first violation
tagged with a field name.
"""

from eventric.validation import (
    FromInvalid,
    Invalid,
    Validatable,
    ValidationError,
    Validator,
    check,
    lift_invalid,
    validate,
)

__all__ = [
    "FromInvalid",
    "Invalid",
    "Validatable",
    "ValidationError",
    "Validator",
    "check",
    "lift_invalid",
    "validate",
]
