"""Validation kernel.

Validators are small, pure predicates returning a stable violation token.
The composition procedure runs an ordered list of them against one value and
raises :class:`Invalid` for the first violation.
"""

from eventric.validation.core import check, validate
from eventric.validation.errors import (
    FromInvalid,
    Invalid,
    ValidationError,
    lift_invalid,
)
from eventric.validation.protocols import Validatable, Validator
from eventric.validation.results import ValidationResult
from eventric.validation.service import ValidationService

__all__ = [
    "FromInvalid",
    "Invalid",
    "Validatable",
    "ValidationError",
    "ValidationResult",
    "ValidationService",
    "Validator",
    "check",
    "lift_invalid",
    "validate",
]
