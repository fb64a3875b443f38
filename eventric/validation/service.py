"""Validation service for checking several fields at once.

The kernel stops at the first violation for a single value. This service
sits above it: each field is validated independently (still first-failure
per field) and the per-field results are collected.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from eventric.utils.logging import get_logger
from eventric.validation.core import check
from eventric.validation.protocols import Validator
from eventric.validation.results import ValidationResult

logger = get_logger(__name__)


class ValidationService:
    """Runs per-field validator lists and aggregates results.

    Example:
        service = ValidationService(
            {
                "username": [string.IsEmpty(), string.ControlCharacters()],
                "tags": [sequence.IsEmpty()],
            }
        )
        results = service.validate_all({"username": "", "tags": ["a"]})
        service.has_errors(results)  # -> True
    """

    def __init__(self, rules: Mapping[str, Sequence[Validator[Any]]]):
        """Initialize service with validators per field.

        Args:
            rules: Mapping of field name to its ordered validators
        """
        self.rules = dict(rules)

    def validate_all(self, values: Mapping[str, Any]) -> dict[str, ValidationResult]:
        """Validate every field that has rules.

        Args:
            values: Mapping of field name to value

        Returns:
            Dictionary mapping field name to ValidationResult, in rule order

        Raises:
            KeyError: If a field with rules is missing from values
        """
        results: dict[str, ValidationResult] = {}
        for field_name, validators in self.rules.items():
            error = check(values[field_name], field_name, validators)
            if error is None:
                results[field_name] = ValidationResult.ok(field_name)
            else:
                logger.debug(
                    "Field failed validation", field=field_name, error=error.message
                )
                results[field_name] = ValidationResult.from_error(field_name, error)

        failed = sum(1 for r in results.values() if r.failed)
        logger.debug("Validated fields", total=len(results), failed=failed)
        return results

    def has_errors(self, results: Mapping[str, ValidationResult]) -> bool:
        """Check if any field failed validation."""
        return any(r.failed for r in results.values())

    def format_error_report(self, results: Mapping[str, ValidationResult]) -> str:
        """Format rendered errors, one per line.

        Args:
            results: Dictionary of validation results

        Returns:
            Newline-separated rendered errors, or empty string if none failed
        """
        return "\n".join(r.format_error() for r in results.values() if r.failed)

    def raise_first(self, results: Mapping[str, ValidationResult]) -> None:
        """Re-raise the first failed field's kernel error.

        Raises:
            Invalid: For the first failed result in order
        """
        for result in results.values():
            if result.error is not None:
                raise result.error
