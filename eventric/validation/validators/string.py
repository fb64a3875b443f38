"""Validators which apply to strings.

Character classification uses the standard library's Unicode data:

- control: general category ``Cc`` (``unicodedata.category``), which covers
  U+0000 to U+001F and U+007F to U+009F
- whitespace: the Unicode White_Space property, i.e. ``str.isspace`` minus
  the information separators U+001C to U+001F, which are control characters
  only

The two are distinct. U+0020 is whitespace but not a control character;
U+000A is both. The empty string has no first or last character, so only
:class:`IsEmpty` rejects it.
"""

import unicodedata

from eventric.const import (
    CONTROL_CHARACTERS,
    EMPTY,
    PRECEDING_WHITESPACE,
    TRAILING_WHITESPACE,
)


# str.isspace accepts these, White_Space does not
_INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_control(char: str) -> bool:
    return unicodedata.category(char) == "Cc"


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _INFORMATION_SEPARATORS


class ControlCharacters:
    """Validates that a string does not contain control characters."""

    def validate(self, value: str) -> str | None:
        if any(_is_control(char) for char in value):
            return CONTROL_CHARACTERS
        return None


class IsEmpty:
    """Validates that a string is not empty."""

    def validate(self, value: str) -> str | None:
        return EMPTY if not value else None


class PrecedingWhitespace:
    """Validates that a string does not start with whitespace."""

    def validate(self, value: str) -> str | None:
        if value and _is_whitespace(value[0]):
            return PRECEDING_WHITESPACE
        return None


class TrailingWhitespace:
    """Validates that a string does not end with whitespace."""

    def validate(self, value: str) -> str | None:
        if value and _is_whitespace(value[-1]):
            return TRAILING_WHITESPACE
        return None
