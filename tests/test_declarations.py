"""Tests for formkit.declarations — has_field and MRO collection."""

import pytest

from formkit.declarations import (
    Declarative,
    FieldAccessor,
    FieldDecl,
    FormRole,
    collect_declarations,
    has_field,
    iter_field_list,
)
from formkit.errors import ConfigurationError


class TestHasField:
    def test_type_and_attrs(self) -> None:
        decl = has_field("Integer", required=True)
        assert isinstance(decl, FieldDecl)
        assert decl.name is None
        assert decl.attrs == {"type": "Integer", "required": True}

    def test_without_type(self) -> None:
        assert has_field(label="Title").attrs == {"label": "Title"}

    def test_explicit_name(self) -> None:
        assert has_field("Text", name="address.street").name == "address.street"


class TestCollectDeclarations:
    def test_own_declarations_only(self) -> None:
        class Base(Declarative):
            a = has_field("Text")

        class Child(Base):
            b = has_field("Text")

        assert Base._declared_fields == (("a", {"type": "Text"}),)
        assert Child._declared_fields == (("b", {"type": "Text"}),)

    def test_base_first(self) -> None:
        class RoleA(FormRole):
            a = has_field("Text")

        class RoleB(FormRole):
            b = has_field("Text")

        class Combined(RoleB, RoleA):
            c = has_field("Text")

        names = [name for name, _ in collect_declarations(Combined)]
        assert names == ["a", "b", "c"]

    def test_redeclaration_kept_for_builder(self) -> None:
        class Base(FormRole):
            a = has_field("Text")

        class Child(Base):
            a = has_field("Integer")

        assert collect_declarations(Child) == [("a", {"type": "Text"}), ("a", {"type": "Integer"})]

    def test_attribute_becomes_accessor(self) -> None:
        class Role(FormRole):
            street = has_field("Text", name="address.street")

        accessor = Role.__dict__["street"]
        assert isinstance(accessor, FieldAccessor)
        assert accessor.name == "address.street"


class TestIterFieldList:
    def test_mapping(self) -> None:
        assert list(iter_field_list({"a": "Text", "b": None})) == [("a", "Text"), ("b", None)]

    def test_pairs(self) -> None:
        assert list(iter_field_list([("a", "Text"), ["b", "Integer"]])) == [("a", "Text"), ("b", "Integer")]

    def test_flat(self) -> None:
        assert list(iter_field_list(["a", "Text", "b", {"type": "Integer"}])) == [
            ("a", "Text"),
            ("b", {"type": "Integer"}),
        ]

    def test_odd_flat_list(self) -> None:
        with pytest.raises(ConfigurationError):
            list(iter_field_list(["a"]))
