"""Checkbox and radio inputs."""

from typing import TYPE_CHECKING, Any

from formkit.widgets import register_widget
from formkit.widgets.base import Widget

if TYPE_CHECKING:
    from formkit.fields.base import Field
    from formkit.result import Result


class _ToggleWidget(Widget):
    input_type = "checkbox"

    def on_value(self, field: "Field") -> Any:
        raise NotImplementedError

    def render_input(self, field: "Field", result: "Result") -> str:
        f = field.render_filter
        on_value = self.on_value(field)
        output = f'<input type="{self.input_type}" name="{f(field.html_name)}"'
        output += f' id="{f(field.id)}" value="{f(on_value)}"'
        if field.fif(result) == str(on_value):
            output += ' checked="checked"'
        output += " />"
        return output


@register_widget("checkbox")
class CheckboxWidget(_ToggleWidget):
    def on_value(self, field: "Field") -> Any:
        return field.checkbox_value


@register_widget("radio")
class RadioWidget(_ToggleWidget):
    input_type = "radio"

    def on_value(self, field: "Field") -> Any:
        return field.radio_value
