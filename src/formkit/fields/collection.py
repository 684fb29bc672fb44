"""Fields — builds, looks up, sorts, and validates a list of fields.

Shared by ``Form`` and ``Compound``. ``build_fields()`` runs once per
instance:

1. Declarations from ``has_field`` across the MRO (base classes first),
   then the ``field_list`` hook's groups: ``required``, ``optional``,
   ``fields``, ``auto_required``, ``auto_optional``.
2. Each declaration becomes a field via ``make_field()``. A name that is
   already present is replaced at its existing position.
3. Fields without an explicit ``order`` are numbered after the highest
   explicit one, in declaration sequence.
4. Dotted names (``address.street``) are moved under their parent field,
   shallowest paths first.
"""

import logging
from collections.abc import Mapping
from operator import attrgetter
from typing import TYPE_CHECKING, Any

from formkit.config import DEFAULT_CONFIG, FormConfig
from formkit.declarations import FieldSpec, collect_declarations, iter_field_list
from formkit.errors import ConfigurationError, FieldClassError, FieldNotFound, FieldTypeError, OrphanFieldError
from formkit.guess import guess_field_type
from formkit.registry import field_registry
from formkit.result import Result

if TYPE_CHECKING:
    from formkit.fields.base import Field
    from formkit.form import Form

logger = logging.getLogger("formkit.fields")

# (group key, required, auto) in build order
_FIELD_LIST_GROUPS: tuple[tuple[str, bool, bool], ...] = (
    ("required", True, False),
    ("optional", False, False),
    ("fields", False, False),
    ("auto_required", True, True),
    ("auto_optional", False, True),
)
_FIELD_LIST_KEYS = frozenset(key for key, _, _ in _FIELD_LIST_GROUPS)


class Fields:
    """Mixin holding an ordered list of fields and the operations over it."""

    name: str
    fields: list["Field"]

    # Optional hook: a dict of field groups, or a method returning one.
    field_list: Any = None

    @property
    def _config(self) -> FormConfig:
        form = self.form
        return form.config if form is not None else DEFAULT_CONFIG

    # -- List operations --

    def add_field(self, field: "Field") -> None:
        self.fields.append(field)

    def set_field_at(self, index: int, field: "Field") -> None:
        self.fields[index] = field

    def remove_last_field(self) -> "Field":
        return self.fields.pop()

    def clear_fields(self) -> None:
        self.fields.clear()

    @property
    def num_fields(self) -> int:
        return len(self.fields)

    @property
    def has_fields(self) -> bool:
        return bool(self.fields)

    # -- Building --

    def build_fields(self) -> None:
        """Collect declarations and create the field objects."""
        config = self._config
        log = logger.info if config.verbose else logger.debug
        log("build_fields for %s (%s)", self.name, type(self).__name__)

        declared = collect_declarations(type(self))
        if declared:
            self._build_fields(declared, required=False)

        flist = self._get_field_list()
        for key, required, auto in _FIELD_LIST_GROUPS:
            group = flist.get(key)
            if group:
                self._build_fields(group, required, auto=auto)

        if not self.has_fields:
            return
        self._assign_order()
        self._expand_dotted_fields()

    def _get_field_list(self) -> Mapping[str, Any]:
        flist = self.field_list
        if callable(flist):
            flist = flist()
        if not flist:
            return {}
        unknown = set(flist) - _FIELD_LIST_KEYS
        if unknown:
            allowed = ", ".join(key for key, _, _ in _FIELD_LIST_GROUPS)
            msg = f"Unknown field_list group(s) {sorted(unknown)} in {type(self).__name__} (expected: {allowed})"
            raise ConfigurationError(msg)
        return flist

    def _build_fields(self, fields: Any, required: bool, auto: bool = False) -> None:
        if auto:
            if isinstance(fields, str):
                fields = [fields]
            for name in fields:
                type_tag = self.guess_field_type(name)
                if not type_tag:
                    msg = f"Could not guess field type for field '{name}'"
                    raise FieldTypeError(msg)
                self._set_field(name, type_tag, required)
            return

        for name, spec in iter_field_list(fields):
            self._set_field(name, spec, required)

    def _set_field(self, name: str, spec: FieldSpec, required: bool) -> None:
        field = self.make_field(name, spec)
        if not field.required:
            field.required = required
        index = self.field_index(field.full_name)
        if index is None:
            self.add_field(field)
        else:
            logger.debug("Replacing field %r at position %d", field.full_name, index)
            self.set_field_at(index, field)

    def make_field(self, name: str, spec: FieldSpec) -> "Field":
        """Create a field object from a type tag or an attribute mapping.

        Args:
            name: The field's name, possibly dotted (``address.street``).
            spec: A type tag (``"Text"``), or a mapping of field attributes
                with an optional ``"type"`` key. The mapping is not modified.

        Raises:
            FieldTypeError: If the type tag is not registered.
            FieldClassError: If the class cannot be loaded or constructed.
        """
        config = self._config
        attrs: dict[str, Any] = dict(spec) if isinstance(spec, Mapping) else {"type": spec}
        type_tag = attrs.pop("type", None) or config.default_field_type
        cls = field_registry.resolve(type_tag, field_name=name, namespace=config.field_namespace)

        attrs["name"] = name
        attrs["type"] = type_tag
        form = self.form
        if form is not None:
            attrs["form"] = form
        if form is None or self is not form:
            attrs["parent"] = self

        try:
            return cls(**attrs)
        except TypeError as exc:
            msg = f"Could not create field '{name}' of class {cls.__module__}.{cls.__qualname__}: {exc}"
            raise FieldClassError(msg) from exc

    def _assign_order(self) -> None:
        next_order = max((field.order for field in self.fields), default=0) + 1
        for field in self.fields:
            if not field.order:
                field.order = next_order
                next_order += 1

    def _expand_dotted_fields(self) -> None:
        dotted = [field for field in self.fields if "." in field.name]
        # Parents before children regardless of spelling: "a.b" before "a.b.c".
        dotted.sort(key=lambda field: (field.name.count("."), field.name))
        for field in dotted:
            parent_path, _, leaf = field.name.rpartition(".")
            parent = self._find_parent(parent_path)
            if parent is None:
                self._handle_orphan(field, parent_path)
                self.fields.remove(field)
                continue
            self.fields.remove(field)
            field.parent = parent
            field.name = leaf
            index = parent.field_index(field.full_name)
            if index is None:
                parent.add_field(field)
            else:
                parent.set_field_at(index, field)
            logger.debug("Moved field %r under %r", field.full_name, parent_path)

    def _find_parent(self, path: str) -> "Fields | None":
        node: Fields = self
        for segment in path.split("."):
            found = next((field for field in node.fields if field.name == segment), None)
            if not isinstance(found, Fields):
                return None
            node = found
        return node

    def _handle_orphan(self, field: "Field", parent_path: str) -> None:
        policy = self._config.orphan_fields
        if policy == "raise":
            raise OrphanFieldError(field.name, parent_path)
        if policy == "warn":
            logger.warning(
                "Dropping field %r: parent field %r not found in %s",
                field.name,
                parent_path,
                type(self).__name__,
            )

    def guess_field_type(self, name: str) -> str | None:
        form = self.form
        guesser = getattr(form, "type_guesser", None) or guess_field_type
        return guesser(name)

    # -- Lookup --

    def field_index(self, full_name: str) -> int | None:
        """Position of the field named *full_name*, or None."""
        for index, field in enumerate(self.fields):
            if field.full_name == full_name:
                return index
        return None

    def field(self, name: str, no_die: bool = False) -> "Field | None":
        """Return the first field whose full name or leaf name is *name*.

        Dotted names also resolve through compound fields. Raises
        ``FieldNotFound`` unless *no_die* is true, in which case ``None``
        is returned.
        """
        for field in self.fields:
            if field.full_name == name or field.name == name:
                return field
        if "." in name:
            head, _, rest = name.partition(".")
            parent = self.field(head, no_die=True)
            if isinstance(parent, Fields):
                found = parent.field(rest, no_die=True)
                if found is not None:
                    return found
        if no_die:
            return None
        raise FieldNotFound(name, self.name or type(self).__name__)

    def sorted_fields(self) -> list["Field"]:
        """Fields ordered by ``order``; ties keep insertion order."""
        return sorted(self.fields, key=attrgetter("order"))

    # -- Results and validation --

    def fields_validate(self, result: Result) -> None:
        """Validate every field directly owned by this collection.

        Runs in insertion order. Fields marked ``clear`` are skipped, and
        fields belonging to another collection are left to that parent.
        The form's ``validate_<name>`` hook runs only for fields that ended
        with a value.
        """
        for field in self.fields:
            if field.clear:
                continue
            parent = field.parent
            if parent is not None and parent is not self:
                continue
            field_result = result.field(field.name)
            field.validate_field(field_result)
            if not field_result.has_value or field_result.value is None:
                continue
            field.validate_hook(field_result)
