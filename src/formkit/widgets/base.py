"""Widget base — escaping and the shared label/error wrapper."""

import html
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formkit.fields.base import Field
    from formkit.result import Result


def escape_html(value: Any) -> str:
    """Default render filter: escape ``&``, ``<``, ``>``, ``"`` and ``'``.

    Values that are already markup (anything with ``__html__``) pass
    through unchanged.
    """
    if value is None:
        return ""
    if hasattr(value, "__html__"):
        return str(value.__html__())
    return html.escape(str(value), quote=True)


class Widget:
    """Renders one kind of field.

    Subclasses build the input markup in ``render_input``; ``render_field``
    wraps it in a ``<div class="field">`` with the label and one
    ``<span class="field-error">`` per error.
    """

    wrap: bool = True
    show_label: bool = True

    def render(self, field: "Field", result: "Result") -> str:
        return self.render_field(field, result, self.render_input(field, result))

    def render_input(self, field: "Field", result: "Result") -> str:
        raise NotImplementedError

    def render_field(self, field: "Field", result: "Result", rendered: str) -> str:
        if not self.wrap:
            return rendered
        f = field.render_filter
        classes = ["field"]
        if field.css_class:
            classes.append(field.css_class)
        if result.has_errors:
            classes.append("field--error")

        output = f'\n<div class="{f(" ".join(classes))}">'
        if self.show_label:
            output += f'<label for="{f(field.id)}">{f(field.label)}</label>'
        output += rendered
        for message in result.errors:
            output += f'<span class="field-error">{f(message)}</span>'
        output += "</div>\n"
        return output
