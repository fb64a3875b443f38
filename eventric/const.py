"""Constants used throughout the library.

Violation tokens are part of the public contract: downstream code may match
on them, so they never change once released.
"""

# Violation tokens
EMPTY = "empty"
CONTROL_CHARACTERS = "control characters"
PRECEDING_WHITESPACE = "preceding whitespace"
TRAILING_WHITESPACE = "trailing whitespace"

TOKENS = frozenset(
    {
        EMPTY,
        CONTROL_CHARACTERS,
        PRECEDING_WHITESPACE,
        TRAILING_WHITESPACE,
    }
)

# Rendered error prefix
ERROR_PREFIX = "Validation Error: "

# Message template for a failed field
MESSAGE_TEMPLATE = "{name}: {token}"
