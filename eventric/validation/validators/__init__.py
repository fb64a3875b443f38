"""Built-in validator catalogue.

Validators are grouped by the shape of value they apply to. Each module
defines its own classes, so shapes that share a concept (``IsEmpty``) do not
share a type:

    from eventric.validation.validators import sequence, string

    validate(name, "name", [string.IsEmpty(), string.TrailingWhitespace()])
    validate(tags, "tags", [sequence.IsEmpty()])
"""

from eventric.validation.validators import array, sequence, sets, string

__all__ = ["array", "sequence", "sets", "string"]
