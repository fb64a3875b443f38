"""Tests for fixed-size array validators."""

from array import array

from eventric.const import EMPTY
from eventric.validation.validators.array import IsEmpty


class TestIsEmpty:
    """Tests for the array IsEmpty validator."""

    def test_valid_with_integers(self):
        assert IsEmpty().validate((1, 2, 3)) is None

    def test_invalid(self):
        assert IsEmpty().validate(()) == EMPTY

    def test_valid_with_strings(self):
        assert IsEmpty().validate(("hello",)) is None

    def test_valid_single_element(self):
        assert IsEmpty().validate((42,)) is None

    def test_typed_arrays(self):
        assert IsEmpty().validate(array("i")) == EMPTY
        assert IsEmpty().validate(array("d", [1.0, 2.0])) is None
