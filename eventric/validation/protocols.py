"""Common interfaces for validators and validatable values.

This module defines the protocols that validators and self-validating
composite values implement. Neither protocol requires inheritance: any object
with a matching ``validate`` method satisfies it.
"""

from typing import Protocol, Self, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Validator(Protocol[T_contra]):
    """A single-value predicate with a stable violation token.

    Validators are stateless and pure: the result depends only on the value
    passed in, and the value is never mutated.

    Example:
        validator: Validator[str] = string.IsEmpty()
        validator.validate("")  # -> "empty"
        validator.validate("x")  # -> None

    Runtime checks only look for a ``validate`` method, so any validatable
    value also passes ``isinstance(value, Validator)``.
    """

    def validate(self, value: T_contra) -> str | None:
        """Check the value against this predicate.

        Args:
            value: The value under test

        Returns:
            None if the predicate is satisfied, otherwise a short, fixed
            violation token (never including the field name)
        """
        ...


class Validatable(Protocol):
    """A composite value that can check its own state.

    Not runtime-checkable: its only member is ``validate``, the same name a
    :class:`Validator` has, so ``isinstance`` could not tell the two apart.

    Implementations return ``self`` when valid, so a value can be threaded
    through a pipeline as ``value = value.validate()``, and raise a domain
    error constructible from :class:`~eventric.validation.errors.Invalid`
    otherwise (see :class:`~eventric.validation.errors.FromInvalid`).

    Example:
        class Username:
            def __init__(self, value: str):
                self.value = value

            def validate(self) -> "Username":
                with lift_invalid(UsernameError):
                    validate(self.value, "username", [string.IsEmpty()])
                return self
    """

    def validate(self) -> Self:
        """Validate self, returning self if valid.

        Raises:
            Exception: The implementer's domain error on failure
        """
        ...
