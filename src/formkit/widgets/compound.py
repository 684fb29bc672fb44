"""Compound fields render as a fieldset around their children."""

from typing import TYPE_CHECKING

from formkit.widgets import register_widget, render_widget
from formkit.widgets.base import Widget

if TYPE_CHECKING:
    from formkit.fields.compound import Compound
    from formkit.result import Result


@register_widget("compound")
class CompoundWidget(Widget):
    def render(self, field: "Compound", result: "Result") -> str:  # type: ignore[override]
        f = field.render_filter
        output = f'\n<fieldset class="compound" id="{f(field.id)}">'
        output += f"<legend>{f(field.label)}</legend>"
        for child in field.sorted_fields():
            child_result = result.field(child.name, no_die=True)
            if child_result is None:
                child_result = child.result_from_default()
            output += render_widget(child, child_result)
        for message in result.errors:
            output += f'<span class="field-error">{f(message)}</span>'
        output += "</fieldset>\n"
        return output
