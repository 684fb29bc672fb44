"""Field type registry — type tag to field class lookup.

``make_field()`` never builds class names out of strings for the built-in
types: every tag (``"Text"``, ``"Checkbox"``, ...) is a key in the table
below, filled at import time by the ``@register_field`` decorator on each
field class.

A leading ``+`` escapes the table and names a class by import path::

    has_field("+myapp.fields:ColorField")            # explicit path
    has_field("+ColorField")                         # with config.field_namespace="myapp.fields"
"""

import importlib
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from formkit.errors import FieldClassError, FieldTypeError

if TYPE_CHECKING:
    from formkit.fields.base import Field


class FieldRegistry:
    """Mapping of type tags to field classes."""

    __slots__ = ("_types",)

    def __init__(self) -> None:
        self._types: dict[str, "type[Field]"] = {}

    def register(self, tag: str, cls: "type[Field]") -> None:
        """Add (or replace) the class for *tag*."""
        self._types[tag] = cls

    def get(self, tag: str) -> "type[Field] | None":
        return self._types.get(tag)

    def resolve(
        self,
        tag: str,
        *,
        field_name: str,
        namespace: str | None = None,
    ) -> "type[Field]":
        """Resolve a type tag to a field class.

        Raises:
            FieldTypeError: If *tag* is not registered.
            FieldClassError: If an escaped ``+`` path cannot be imported.
        """
        if tag.startswith("+"):
            bare = tag[1:]
            path = f"{namespace}.{bare}" if namespace else bare
            return _import_class(path, tag=bare, field_name=field_name)

        cls = self._types.get(tag)
        if cls is None:
            known = ", ".join(sorted(self._types))
            msg = f"Unknown field type {tag!r} for field {field_name!r} (registered: {known})"
            raise FieldTypeError(msg)
        return cls

    def __contains__(self, tag: str) -> bool:
        return tag in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)


def _import_class(path: str, *, tag: str, field_name: str) -> "type[Field]":
    """Import ``"pkg.module:Class"`` or ``"pkg.module.Class"``."""
    from formkit.fields.base import Field

    if ":" in path:
        module_path, _, attr_name = path.partition(":")
    else:
        module_path, _, attr_name = path.rpartition(".")

    failure = f"Could not load field class '{tag}' {path} for field '{field_name}'"
    if not module_path or not attr_name:
        raise FieldClassError(failure)

    try:
        module = importlib.import_module(module_path)
        cls = getattr(module, attr_name)
    except (ImportError, AttributeError) as exc:
        raise FieldClassError(f"{failure}: {exc}") from exc

    if not (isinstance(cls, type) and issubclass(cls, Field)):
        raise FieldClassError(f"{failure}: not a Field subclass")
    return cls


# Process-wide table, populated by the built-in field modules.
field_registry = FieldRegistry()


def register_field[F: "Field"](tag: str) -> Callable[[type[F]], type[F]]:
    """Class decorator: register a field class under *tag*.

    Usage::

        @register_field("Color")
        class Color(Text):
            widget = "color"
    """

    def decorator(cls: type[F]) -> type[F]:
        field_registry.register(tag, cls)
        return cls

    return decorator
