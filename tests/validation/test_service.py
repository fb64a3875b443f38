"""Tests for ValidationService."""

from unittest.mock import Mock

import pytest

from eventric.const import EMPTY
from eventric.validation.errors import Invalid
from eventric.validation.service import ValidationService
from eventric.validation.validators import sequence, string


@pytest.fixture
def service():
    return ValidationService(
        {
            "username": [string.IsEmpty(), string.ControlCharacters()],
            "tags": [sequence.IsEmpty()],
        }
    )


class TestValidationService:
    """Tests for ValidationService orchestration."""

    def test_validate_all_success(self, service):
        """Test validation when all fields pass."""
        results = service.validate_all({"username": "alice", "tags": ["a"]})

        assert not service.has_errors(results)
        assert len(results) == 2
        assert results["username"].success
        assert results["tags"].success
        assert service.format_error_report(results) == ""

    def test_validate_all_one_fails(self, service):
        """Test validation when one field fails."""
        results = service.validate_all({"username": "alice", "tags": []})

        assert service.has_errors(results)
        assert results["username"].success
        assert results["tags"].message == f"tags: {EMPTY}"
        assert service.format_error_report(results) == "Validation Error: tags: empty"

    def test_validate_all_both_fail(self, service):
        """Test validation when multiple fields fail."""
        results = service.validate_all({"username": "al\nice", "tags": []})

        assert service.has_errors(results)
        assert service.format_error_report(results) == (
            "Validation Error: username: control characters\n"
            "Validation Error: tags: empty"
        )

    def test_first_failure_per_field(self):
        """Each field still stops at its first violation."""
        later = Mock()
        later.validate.return_value = "never"
        service = ValidationService({"name": [string.IsEmpty(), later]})

        results = service.validate_all({"name": ""})

        assert results["name"].message == "name: empty"
        later.validate.assert_not_called()

    def test_results_in_rule_order(self, service):
        results = service.validate_all({"tags": [], "username": ""})

        assert list(results) == ["username", "tags"]

    def test_extra_values_ignored(self, service):
        results = service.validate_all(
            {"username": "alice", "tags": ["a"], "other": ""}
        )

        assert "other" not in results

    def test_missing_field_raises(self, service):
        with pytest.raises(KeyError):
            service.validate_all({"username": "alice"})

    def test_no_rules(self):
        service = ValidationService({})

        results = service.validate_all({"anything": ""})

        assert results == {}
        assert not service.has_errors(results)

    def test_raise_first(self, service):
        results = service.validate_all({"username": "", "tags": []})

        with pytest.raises(Invalid) as exc_info:
            service.raise_first(results)

        assert exc_info.value == Invalid("username: empty")

    def test_raise_first_no_errors(self, service):
        results = service.validate_all({"username": "alice", "tags": ["a"]})

        assert service.raise_first(results) is None
