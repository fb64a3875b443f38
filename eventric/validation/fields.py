"""pydantic integration.

Lets kernel validators guard pydantic model fields:

    class Account(BaseModel):
        username: Annotated[
            str, validated("username", string.IsEmpty(), string.ControlCharacters())
        ]

:class:`~eventric.validation.errors.Invalid` is a ``ValueError``, so pydantic
reports it as a regular field error.
"""

from typing import Any

from pydantic import AfterValidator

from eventric.validation.core import validate
from eventric.validation.protocols import Validator


def validated(name: object, *validators: Validator[Any]) -> AfterValidator:
    """Build a pydantic after-validator running the given validators in order.

    Args:
        name: Field label used in the error message
        validators: Ordered validators for the field's value

    Returns:
        An AfterValidator returning the value unchanged when valid
    """

    def _run(value: Any) -> Any:
        validate(value, name, validators)
        return value

    return AfterValidator(_run)
