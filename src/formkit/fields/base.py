"""Field — one form input's static definition.

A field knows its type, constraints, and ordering. Everything that
changes per request (submitted input, inflated value, errors) lives on a
``Result`` produced by the ``result_from_*`` methods, so a built form can
be processed again without resetting its fields.

``form`` and ``parent`` are weak back references: the form owns its
fields, and a compound field owns its children, never the other way round.
"""

import weakref
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from kida.template import Markup

from formkit.result import NO_INPUT, Result
from formkit.validation import Validator, first_error
from formkit.widgets import escape_html, render_widget

if TYPE_CHECKING:
    from formkit.fields.collection import Fields
    from formkit.form import Form


class Field:
    """Base class for all field types.

    Subclasses set class-level defaults (``widget``, ``has_static_value``,
    ``writeonly``, ``noupdate``) and override ``inflate`` / ``deflate`` /
    ``validate`` for their own conversions and checks.
    """

    widget: str = "text"
    has_static_value: bool = False
    writeonly: bool = False
    noupdate: bool = False
    inflate_message: str = "Invalid value"

    def __init__(
        self,
        *,
        name: str,
        type: str | None = None,  # noqa: A002
        label: str | None = None,
        order: int = 0,
        required: bool = False,
        required_message: str | None = None,
        default: Any = None,
        widget: str | None = None,
        id: str | None = None,  # noqa: A002
        css_class: str = "",
        validators: Iterable[Validator] = (),
        clear: bool = False,
        noupdate: bool | None = None,
        writeonly: bool | None = None,
        form: "Form | None" = None,
        parent: "Fields | None" = None,
    ) -> None:
        self.name = name
        self.type = type or self.__class__.__name__
        self._label = label
        self.order = order
        self.required = required
        self._required_message = required_message
        self.default = default
        if widget is not None:
            self.widget = widget
        self._id = id
        self.css_class = css_class
        self.validators: list[Validator] = list(validators)
        self.clear = clear
        if noupdate is not None:
            self.noupdate = noupdate
        if writeonly is not None:
            self.writeonly = writeonly
        self._form: weakref.ref[Form] | None = None
        self._parent: weakref.ref[Fields] | None = None
        self.form = form
        self.parent = parent

    # -- Back references --

    @property
    def form(self) -> "Form | None":
        return self._form() if self._form is not None else None

    @form.setter
    def form(self, form: "Form | None") -> None:
        self._form = weakref.ref(form) if form is not None else None

    @property
    def parent(self) -> "Fields | None":
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, parent: "Fields | None") -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    # -- Naming --

    @property
    def full_name(self) -> str:
        """Dotted path from the top-level field, e.g. ``address.street``."""
        parent = self.parent
        if isinstance(parent, Field):
            return f"{parent.full_name}.{self.name}"
        return self.name

    @property
    def html_name(self) -> str:
        return self.full_name

    @property
    def id(self) -> str:  # noqa: A003
        return self._id or self.html_name

    @property
    def label(self) -> str:
        if self._label is not None:
            return self._label
        return self.name.rsplit(".", 1)[-1].replace("_", " ").capitalize()

    @property
    def required_message(self) -> str:
        if self._required_message is not None:
            return self._required_message
        form = self.form
        if form is not None:
            return form.config.required_message
        return "This field is required"

    @property
    def render_filter(self) -> Callable[[Any], str]:
        """Escaping function applied to every value embedded in markup."""
        form = self.form
        if form is not None:
            return form.render_filter
        return escape_html

    # -- Results --

    def result_from_input(self, params: Mapping[str, Any]) -> Result:
        return Result(self.name, self, input=params.get(self.html_name, NO_INPUT))

    def result_from_object(self, obj: Any) -> Result:
        result = Result(self.name, self)
        value = _lookup(obj, self.name, self.default)
        if value is not None:
            result.value = value
        return result

    def result_from_default(self) -> Result:
        result = Result(self.name, self)
        if self.default is not None:
            result.value = self.default
        return result

    # -- Conversion --

    def inflate(self, raw: Any) -> Any:
        """Convert submitted input to the field's value. Raise ValueError on failure."""
        return raw.strip() if isinstance(raw, str) else raw

    def deflate(self, value: Any) -> str:
        """Convert a value back to a fill-in-form string."""
        return "" if value is None else str(value)

    def fif(self, result: Result) -> str:
        if result.has_input:
            return "" if result.input is None else str(result.input)
        if result.has_value and result.value is not None:
            return self.deflate(result.value)
        return ""

    # -- Validation --

    def validate_field(self, result: Result) -> None:
        """Validate ``result.input`` and store the inflated value on *result*.

        Errors are recorded on the result; nothing is raised.
        """
        result.errors.clear()
        result.clear_value()

        raw = result.input
        if raw is NO_INPUT or raw is None or (isinstance(raw, str) and not raw.strip()):
            if self.required:
                result.add_error(self.required_message)
            return

        try:
            value = self.inflate(raw)
        except (ValueError, TypeError):
            result.add_error(self.inflate_message)
            return

        self.validate(value, result)
        if result.has_errors:
            return

        error = first_error(self.validators, value)
        if error is not None:
            result.add_error(error)
            return

        result.value = value

    def validate(self, value: Any, result: Result) -> None:
        """Type-specific checks on the inflated value. Record errors on *result*."""

    def validate_hook(self, result: Result) -> None:
        """Run the form's ``validate_<full_name>`` method, if it defines one."""
        form = self.form
        if form is None:
            return
        method = getattr(form, "validate_" + self.full_name.replace(".", "_"), None)
        if method is None or not callable(method):
            return
        error = method(result.value)
        if error:
            result.add_error(error)

    # -- Rendering --

    def render(self, result: Result | None = None) -> Markup:
        """Render this field with its widget."""
        if result is None:
            result = self.result_from_default()
        return Markup(render_widget(self, result))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name!r}, order={self.order})"


def _lookup(obj: Any, name: str, default: Any) -> Any:
    """Read *name* from a mapping or an attribute of *obj*."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)
