"""Tests for formkit.registry — type tag resolution."""

import pytest

from formkit.errors import FieldClassError, FieldTypeError
from formkit.fields import Checkbox, Compound, Hidden, Integer, Password, Radio, Submit, Text
from formkit.registry import FieldRegistry, field_registry


class TestBuiltinTypes:
    @pytest.mark.parametrize(
        ("tag", "cls"),
        [
            ("Text", Text),
            ("Password", Password),
            ("Hidden", Hidden),
            ("Integer", Integer),
            ("Checkbox", Checkbox),
            ("Submit", Submit),
            ("Radio", Radio),
            ("Compound", Compound),
        ],
    )
    def test_registered(self, tag: str, cls: type) -> None:
        assert field_registry.resolve(tag, field_name="f") is cls


class TestFieldRegistry:
    def test_register_and_get(self) -> None:
        registry = FieldRegistry()
        registry.register("Plain", Text)
        assert registry.get("Plain") is Text
        assert "Plain" in registry
        assert len(registry) == 1
        assert list(registry) == ["Plain"]

    def test_unknown_tag_names_field(self) -> None:
        registry = FieldRegistry()
        with pytest.raises(FieldTypeError, match="'color'.*'favourite'"):
            registry.resolve("color", field_name="favourite")

    def test_escaped_dotted_path(self) -> None:
        assert FieldRegistry().resolve("+formkit.fields.checkbox.Checkbox", field_name="f") is Checkbox

    def test_escaped_path_with_namespace(self) -> None:
        cls = FieldRegistry().resolve("+Submit", field_name="f", namespace="formkit.fields.submit")
        assert cls is Submit

    def test_missing_attribute(self) -> None:
        with pytest.raises(FieldClassError, match="Could not load field class 'formkit.fields:Nope'"):
            FieldRegistry().resolve("+formkit.fields:Nope", field_name="f")

    def test_bare_name_without_module(self) -> None:
        with pytest.raises(FieldClassError, match="for field 'f'"):
            FieldRegistry().resolve("+Text", field_name="f")
