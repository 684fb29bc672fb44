"""Submit button."""

from typing import TYPE_CHECKING

from formkit.widgets import register_widget
from formkit.widgets.base import Widget

if TYPE_CHECKING:
    from formkit.fields.base import Field
    from formkit.result import Result


@register_widget("submit")
class SubmitWidget(Widget):
    show_label = False

    def render_input(self, field: "Field", result: "Result") -> str:
        f = field.render_filter
        return (
            f'<input type="submit" name="{f(field.html_name)}" id="{f(field.id)}"'
            f' value="{f(field.fif(result))}" />'
        )
