"""Form — declarative field container with validation and rendering.

Usage::

    from formkit import Form, has_field

    class SignupForm(Form):
        name = "signup"
        action = "/signup"

        username = has_field("Text", required=True, maxlength=32)
        password = has_field("Password", required=True)
        remember_me = has_field("Checkbox")
        submit = has_field("Submit", value="Sign up")

        def validate_username(self, value):
            if value == "root":
                return "That name is reserved"
            return None

    form = SignupForm()
    result = form.process(request_params)
    if not result:
        return form.render(result)
    save(result.values)

A form instance builds its fields once. Every ``process()`` call creates a
fresh ``FormResult``, so the same instance may be rendered empty, then
re-rendered with submitted input and errors.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from kida.template import Markup

from formkit.config import DEFAULT_CONFIG, FormConfig
from formkit.declarations import Declarative
from formkit.fields.base import Field
from formkit.fields.collection import Fields
from formkit.guess import TypeGuesser
from formkit.result import FormResult
from formkit.widgets import escape_html, render_form_widget

logger = logging.getLogger("formkit.form")


class Form(Fields, Declarative):
    """Base class for declarative forms.

    Class attributes (all overridable per instance through the constructor):

    - ``name``: rendered as the ``<form>`` id.
    - ``action`` / ``http_method``: rendered on the ``<form>`` tag.
    - ``config``: a ``FormConfig``.
    - ``field_list``: optional dict (or method returning one) with the
      groups ``required``, ``optional``, ``fields``, ``auto_required``,
      ``auto_optional``.
    - ``type_guesser``: ``(name) -> type tag | None`` for auto groups.
    - ``render_filter``: escaping function for rendered values.
    - ``form_widget``: tag of the whole-form widget (default ``"div"``).
    """

    name: str | None = None
    action: str | None = None
    http_method: str | None = "post"
    config: FormConfig = DEFAULT_CONFIG
    type_guesser: TypeGuesser | None = None
    render_filter: Callable[[Any], str] = staticmethod(escape_html)
    form_widget: str = "div"

    def __init__(
        self,
        *,
        name: str | None = None,
        action: str | None = None,
        http_method: str | None = None,
        config: FormConfig | None = None,
        params: Mapping[str, Any] | None = None,
        init_object: Any = None,
    ) -> None:
        cls = type(self)
        self.name = name if name is not None else cls.name
        self.action = action if action is not None else cls.action
        self.http_method = http_method if http_method is not None else cls.http_method
        self.config = config if config is not None else cls.config
        self.fields: list[Field] = []
        self.result: FormResult | None = None

        self.build_fields()
        if params is not None or init_object is not None:
            self.process(params, init_object)

    @property
    def form(self) -> "Form":
        return self

    # -- Processing --

    def process(self, params: Mapping[str, Any] | None = None, init_object: Any = None) -> FormResult:
        """Build a fresh result and validate it if *params* were submitted.

        Args:
            params: Submitted parameters (any mapping of names to strings).
                ``None`` means "not submitted": no validation runs.
            init_object: Initial values for an unsubmitted form, read by
                field name from a mapping or object attributes.

        Returns:
            The new ``FormResult``, also stored as ``form.result``.
        """
        submitted = params is not None
        result = self._new_result(params, init_object)
        if submitted:
            self.fields_validate(result)
            self.validate(result)

        self.result = result
        logger.debug(
            "Processed form %s: submitted=%s valid=%s",
            self.name or type(self).__name__,
            submitted,
            result.is_valid,
        )
        return result

    def _new_result(self, params: Mapping[str, Any] | None, init_object: Any) -> FormResult:
        """Fresh result tree from params, an init object, or field defaults."""
        result = FormResult(self, submitted=params is not None)
        for field in self.fields:
            if params is not None:
                result.add_child(field.result_from_input(params))
            elif init_object is not None:
                result.add_child(field.result_from_object(init_object))
            else:
                result.add_child(field.result_from_default())
        return result

    def validate(self, result: FormResult) -> None:
        """Form-wide validation hook, run after every field validated.

        Override to check fields against each other; record problems with
        ``result.field(name).add_error(...)``.
        """

    # -- Result accessors --

    @property
    def validated(self) -> bool:
        return self.result is not None and self.result.is_valid

    @property
    def values(self) -> dict[str, Any]:
        return self.result.values if self.result is not None else {}

    @property
    def errors(self) -> dict[str, list[str]]:
        return self.result.error_dict if self.result is not None else {}

    @property
    def fif(self) -> dict[str, str]:
        result = self.result if self.result is not None else self._new_result(None, None)
        return result.fif_dict

    # -- Rendering --

    def render(self, result: FormResult | None = None) -> Markup:
        """Render the whole form with its form widget."""
        if result is None:
            result = self.result if self.result is not None else self._new_result(None, None)
        return Markup(render_form_widget(self, result))

    def __repr__(self) -> str:
        names = ", ".join(field.name for field in self.fields)
        return f"{type(self).__name__}({self.name!r}, fields=[{names}])"
