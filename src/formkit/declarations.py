"""Declarative field collection — ``has_field`` and MRO walking.

Field declarations are recorded per class when the class is created
(``__init_subclass__``), so building a form never needs to inspect class
bodies at runtime::

    class AddressRole(FormRole):
        street = has_field("Text")
        city = has_field("Text", required=True)

    class OrderForm(AddressRole, Form):
        quantity = has_field("Integer", order=1)

``collect_declarations(OrderForm)`` walks the MRO base-first, so fields
from ``Form``'s own bases come first and ``OrderForm``'s last. A name
declared again in a more derived class replaces the earlier field in place
when the builder runs.
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from formkit.errors import ConfigurationError

type FieldSpec = str | Mapping[str, Any] | None


class FieldDecl:
    """A field declared in a class body. Holds the field's attributes."""

    __slots__ = ("attrs", "name")

    def __init__(self, name: str | None, attrs: dict[str, Any]) -> None:
        self.name = name
        self.attrs = attrs

    def __repr__(self) -> str:
        return f"has_field({self.name!r}, {self.attrs!r})"


def has_field(type: str | None = None, /, *, name: str | None = None, **attrs: Any) -> FieldDecl:  # noqa: A002
    """Declare a field on a form or role.

    Args:
        type: Field type tag (``"Text"``, ``"Checkbox"``, ``"+pkg.mod:Cls"``).
            Defaults to the form's ``default_field_type``.
        name: Explicit field name. Required for dotted names such as
            ``"address.street"``; defaults to the attribute name.
        **attrs: Field attributes (``required``, ``order``, ``label``, ...).
    """
    if type is not None:
        attrs["type"] = type
    return FieldDecl(name, attrs)


class FieldAccessor:
    """Replaces a ``has_field`` attribute: ``form.email`` returns the built field."""

    __slots__ = ("decl", "name")

    def __init__(self, name: str, decl: FieldDecl) -> None:
        self.name = name
        self.decl = decl

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self.decl
        return instance.field(self.name)


class Declarative:
    """Base for classes that may carry ``has_field`` declarations."""

    _declared_fields: tuple[tuple[str, dict[str, Any]], ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared: list[tuple[str, dict[str, Any]]] = []
        for attr_name, value in list(cls.__dict__.items()):
            if not isinstance(value, FieldDecl):
                continue
            field_name = value.name or attr_name
            declared.append((field_name, value.attrs))
            inherited = [base.__dict__[attr_name] for base in cls.__mro__[1:] if attr_name in base.__dict__]
            if inherited and not isinstance(inherited[0], FieldAccessor):
                # Keep the base attribute (e.g. Form.name) visible on instances.
                delattr(cls, attr_name)
            else:
                setattr(cls, attr_name, FieldAccessor(field_name, value))
        # Own declarations only; inherited ones are gathered from the MRO.
        cls._declared_fields = tuple(declared)


class FormRole(Declarative):
    """Mixin base for reusable groups of fields."""


def collect_declarations(cls: type) -> list[tuple[str, dict[str, Any]]]:
    """Merge declarations across *cls*'s MRO, most-base class first."""
    merged: list[tuple[str, dict[str, Any]]] = []
    for klass in reversed(cls.__mro__):
        own = klass.__dict__.get("_declared_fields")
        if own:
            merged.extend(own)
    return merged


def iter_field_list(fields: Mapping[str, FieldSpec] | Sequence[Any]) -> Iterator[tuple[str, FieldSpec]]:
    """Normalize a ``field_list`` group to ``(name, spec)`` pairs.

    Accepts an insertion-ordered mapping, a sequence of pairs, or a flat
    ``[name, spec, name, spec, ...]`` sequence.
    """
    if isinstance(fields, Mapping):
        yield from fields.items()
        return
    items = list(fields)
    if all(isinstance(item, tuple | list) and len(item) == 2 for item in items):
        for name, spec in items:
            yield name, spec
        return
    if len(items) % 2:
        msg = f"Field list must hold name/type pairs, got odd length {len(items)}"
        raise ConfigurationError(msg)
    for i in range(0, len(items), 2):
        yield items[i], items[i + 1]
