"""Tests for formkit.result — Result trees."""

import pytest

from formkit.errors import FieldNotFound
from formkit.fields import Text
from formkit.result import NO_INPUT, Result


class TestResult:
    def test_defaults(self) -> None:
        result = Result("title")
        assert result.input is NO_INPUT
        assert result.has_input is False
        assert result.has_value is False
        assert result.value is None
        assert result.errors == []
        assert result.fif == ""

    def test_value_tracking(self) -> None:
        result = Result("title")
        result.value = None
        assert result.has_value is True
        result.clear_value()
        assert result.has_value is False

    def test_fif_without_field(self) -> None:
        assert Result("title", input="abc").fif == "abc"
        value_only = Result("age")
        value_only.value = 3
        assert value_only.fif == "3"

    def test_errors(self) -> None:
        result = Result("title")
        result.add_error("bad")
        assert result.has_errors
        assert list(result.iter_errors()) == [(result, "bad")]

    def test_child_lookup(self) -> None:
        root = Result("form")
        address = Result("address")
        city = Result("city")
        address.add_child(city)
        root.add_child(address)

        assert root.field("address") is address
        assert root.field("address.city") is city
        assert root.field("address.zip", no_die=True) is None
        with pytest.raises(FieldNotFound):
            root.field("phone")

    def test_no_input_is_falsy(self) -> None:
        assert not NO_INPUT
        assert repr(NO_INPUT) == "NO_INPUT"


class TestResultWithField:
    def test_child_lookup_on_field_backed_result(self) -> None:
        email = Text(name="email")
        parent = Result("contact")
        child = Result("email", email, input="a@example.com")
        parent.add_child(child)

        assert child.field_def is email
        assert parent.field("email") is child
        assert parent.field("email").fif == "a@example.com"

    def test_definition_does_not_shadow_lookup(self) -> None:
        result = Result("email", Text(name="email"))
        assert callable(result.field)
        assert result.field("missing", no_die=True) is None
