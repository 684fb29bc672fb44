"""Text-like inputs: text, password, hidden."""

from typing import TYPE_CHECKING

from formkit.widgets import register_widget
from formkit.widgets.base import Widget

if TYPE_CHECKING:
    from formkit.fields.base import Field
    from formkit.result import Result


@register_widget("text")
class TextWidget(Widget):
    input_type = "text"

    def render_input(self, field: "Field", result: "Result") -> str:
        f = field.render_filter
        output = f'<input type="{self.input_type}" name="{f(field.html_name)}"'
        output += f' id="{f(field.id)}"'
        size = getattr(field, "size", 0)
        if size:
            output += f' size="{f(size)}"'
        maxlength = getattr(field, "maxlength", 0)
        if maxlength:
            output += f' maxlength="{f(maxlength)}"'
        output += f' value="{f(field.fif(result))}" />'
        return output


@register_widget("password")
class PasswordWidget(TextWidget):
    input_type = "password"


@register_widget("hidden")
class HiddenWidget(TextWidget):
    input_type = "hidden"
    wrap = False
