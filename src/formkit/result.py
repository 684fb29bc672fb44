"""Per-request form state — values, fill-in-form strings, and errors.

A ``Result`` tree mirrors the field tree but holds only what one
``process()`` call produced. Field definitions stay untouched between
requests; a new ``FormResult`` is built for every validate/render pass.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from formkit.errors import FieldNotFound

if TYPE_CHECKING:
    from formkit.fields.base import Field
    from formkit.form import Form


class _NoInput:
    """Sentinel type for "the parameter was not submitted"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_INPUT"

    def __bool__(self) -> bool:
        return False


NO_INPUT: Any = _NoInput()


class Result:
    """Validation and fill-in-form state for a single field.

    ``field_def`` is the ``Field`` that produced this result. ``input`` is
    the raw submitted string (or ``NO_INPUT``), ``value`` the
    inflated value once validation succeeded, ``errors`` the messages that
    validation recorded.
    """

    __slots__ = ("_value", "children", "errors", "field_def", "has_value", "input", "name")

    def __init__(self, name: str, field_def: "Field | None" = None, input: Any = NO_INPUT) -> None:
        self.name = name
        self.field_def = field_def
        self.input = input
        self._value: Any = None
        self.has_value = False
        self.errors: list[str] = []
        self.children: dict[str, Result] = {}

    # -- Value --

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value
        self.has_value = True

    def clear_value(self) -> None:
        self._value = None
        self.has_value = False

    @property
    def has_input(self) -> bool:
        return self.input is not NO_INPUT

    @property
    def fif(self) -> str:
        """Fill-in-form string used to pre-populate the rendered input."""
        if self.field_def is not None:
            return self.field_def.fif(self)
        if self.has_input:
            return "" if self.input is None else str(self.input)
        if self.has_value and self.value is not None:
            return str(self.value)
        return ""

    # -- Errors --

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def iter_errors(self) -> Iterator[tuple["Result", str]]:
        """Yield ``(result, message)`` for this result and all descendants."""
        for message in self.errors:
            yield self, message
        for child in self.children.values():
            yield from child.iter_errors()

    # -- Children --

    def add_child(self, result: "Result") -> None:
        self.children[result.name] = result

    def field(self, name: str, no_die: bool = False) -> "Result | None":
        """Look up a child result by leaf name or dotted path."""
        head, _, rest = name.partition(".")
        child = self.children.get(head)
        if child is not None and rest:
            return child.field(rest, no_die=no_die)
        if child is not None:
            return child
        if no_die:
            return None
        raise FieldNotFound(name, self.name)

    def __repr__(self) -> str:
        return f"Result({self.name!r}, value={self._value!r}, errors={self.errors!r})"


class FormResult(Result):
    """The result of one ``Form.process()`` call.

    Truthy when the form was submitted and validated without errors::

        result = form.process(params)
        if not result:
            return form.render(result)
    """

    __slots__ = ("form", "submitted")

    def __init__(self, form: "Form", submitted: bool = False) -> None:
        super().__init__(form.name or "", field_def=None)
        self.form = form
        self.submitted = submitted

    @property
    def is_valid(self) -> bool:
        """True if the form was submitted and no field recorded an error."""
        return self.submitted and not any(True for _ in self.iter_errors())

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def error_dict(self) -> dict[str, list[str]]:
        """Errors keyed by field full name: ``{"address.city": ["..."]}``."""
        errors: dict[str, list[str]] = {}
        for result, message in self.iter_errors():
            key = result.field_def.full_name if result.field_def is not None else result.name
            errors.setdefault(key, []).append(message)
        return errors

    @property
    def values(self) -> dict[str, Any]:
        """Nested dict of validated values. Write-only fields are omitted."""
        return _collect_values(self)

    @property
    def fif_dict(self) -> dict[str, str]:
        """Flat ``{html_name: fif}`` mapping for template-driven rendering."""
        fif: dict[str, str] = {}
        _collect_fif(self, fif)
        return fif


def _collect_values(result: Result) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name, child in result.children.items():
        if child.field_def is not None and child.field_def.writeonly:
            continue
        if child.children:
            values[name] = _collect_values(child)
        elif child.has_value:
            values[name] = child.value
    return values


def _collect_fif(result: Result, into: dict[str, str]) -> None:
    for child in result.children.values():
        if child.children:
            _collect_fif(child, into)
            continue
        if child.field_def is None or child.field_def.has_static_value:
            continue
        into[child.field_def.html_name] = child.fif
