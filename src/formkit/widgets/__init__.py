"""Widgets — render fields and forms to HTML.

Each field names its widget with a tag (``field.widget = "checkbox"``).
``render_widget()`` looks the tag up in a table filled at import time, so
adding a widget is a registration, not a subclass::

    @register_widget("color")
    class ColorWidget(TextWidget):
        input_type = "color"
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from formkit.errors import ConfigurationError
from formkit.widgets.base import Widget, escape_html

if TYPE_CHECKING:
    from formkit.fields.base import Field
    from formkit.form import Form
    from formkit.result import FormResult, Result
    from formkit.widgets.form import FormWidget

_WIDGETS: dict[str, Widget] = {}
_FORM_WIDGETS: dict[str, "FormWidget"] = {}


def register_widget[W: Widget](tag: str) -> Callable[[type[W]], type[W]]:
    """Class decorator: register a field widget under *tag*."""

    def decorator(cls: type[W]) -> type[W]:
        _WIDGETS[tag] = cls()
        return cls

    return decorator


def register_form_widget(tag: str) -> Callable[[type], type]:
    """Class decorator: register a whole-form widget under *tag*."""

    def decorator(cls: type) -> type:
        _FORM_WIDGETS[tag] = cls()
        return cls

    return decorator


def get_widget(tag: str) -> Widget | None:
    return _WIDGETS.get(tag)


def render_widget(field: "Field", result: "Result") -> str:
    """Render *field* with the widget registered under ``field.widget``.

    Raises:
        ConfigurationError: If no widget is registered for the tag.
    """
    widget = _WIDGETS.get(field.widget)
    if widget is None:
        msg = f"No widget {field.widget!r} registered for field {field.full_name!r}"
        raise ConfigurationError(msg)
    return widget.render(field, result)


def render_form_widget(form: "Form", result: "FormResult") -> str:
    widget = _FORM_WIDGETS.get(form.form_widget)
    if widget is None:
        msg = f"No form widget {form.form_widget!r} registered for form {type(form).__name__}"
        raise ConfigurationError(msg)
    return widget.render(form, result)


# Built-in widgets register themselves on import.
from formkit.widgets import checkbox, compound, form, submit, text  # noqa: E402, F401

__all__ = [
    "Widget",
    "escape_html",
    "get_widget",
    "register_form_widget",
    "register_widget",
    "render_form_widget",
    "render_widget",
]
