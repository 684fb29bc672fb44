"""Tests for formkit.errors — exception hierarchy."""

import pytest

from formkit.errors import (
    ConfigurationError,
    FieldClassError,
    FieldNotFound,
    FieldTypeError,
    FormkitError,
    OrphanFieldError,
)


@pytest.mark.parametrize("exc", [FieldTypeError, FieldClassError, OrphanFieldError])
def test_construction_errors_are_configuration_errors(exc: type) -> None:
    assert issubclass(exc, ConfigurationError)
    assert issubclass(exc, FormkitError)


class TestOrphanFieldError:
    def test_attributes_and_message(self) -> None:
        err = OrphanFieldError("address.street", "address")
        assert err.full_name == "address.street"
        assert err.parent_path == "address"
        assert str(err) == "Field 'address.street' has no parent field 'address'"


class TestFieldNotFound:
    def test_is_lookup_error(self) -> None:
        assert issubclass(FieldNotFound, LookupError)

    def test_message_with_owner(self) -> None:
        assert str(FieldNotFound("city", "address")) == "Field 'city' not found in 'address'"

    def test_message_without_owner(self) -> None:
        err = FieldNotFound("city")
        assert err.name == "city"
        assert str(err) == "Field 'city' not found"
