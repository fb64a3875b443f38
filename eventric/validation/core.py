"""The composition procedure.

Runs an ordered list of validators against a single value. Evaluation is
short-circuiting: the first validator to report a violation determines the
error, and no later validator is invoked.
"""

from collections.abc import Iterable
from typing import TypeVar

from eventric.const import MESSAGE_TEMPLATE
from eventric.validation.errors import Invalid
from eventric.validation.protocols import Validator

T = TypeVar("T")


def check(
    value: T, name: object, validators: Iterable[Validator[T]]
) -> Invalid | None:
    """Run validators in order and return the first failure, if any.

    Args:
        value: The value under test (never mutated or retained)
        name: Field label; only ``str(name)`` is used
        validators: Ordered validators over the value's shape

    Returns:
        None when every validator passes (including when there are none),
        otherwise an Invalid error for the first violation
    """
    for validator in validators:
        token = validator.validate(value)
        if token is not None:
            return Invalid(MESSAGE_TEMPLATE.format(name=name, token=token))
    return None


def validate(value: T, name: object, validators: Iterable[Validator[T]]) -> None:
    """Validate a value, raising on the first violation.

    Args:
        value: The value under test (never mutated or retained)
        name: Field label; only ``str(name)`` is used
        validators: Ordered validators over the value's shape

    Raises:
        Invalid: With message ``"<name>: <token>"`` for the first validator
            in order that reports a violation
    """
    error = check(value, name, validators)
    if error is not None:
        raise error
