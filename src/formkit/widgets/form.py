"""Whole-form widget: ``<form>`` wrapper plus every field in order."""

from typing import TYPE_CHECKING

from formkit.widgets import register_form_widget, render_widget

if TYPE_CHECKING:
    from formkit.form import Form
    from formkit.result import FormResult


class FormWidget:
    """Base for form widgets: ``render(form, result)`` returns the whole form."""

    def render(self, form: "Form", result: "FormResult") -> str:
        raise NotImplementedError


@register_form_widget("div")
class FormDiv(FormWidget):
    """Renders fields sorted by ``order`` between ``render_start`` and ``render_end``.

    With ``config.auto_fieldset`` the fields are wrapped in
    ``<fieldset class="main_fieldset">``.
    """

    def render(self, form: "Form", result: "FormResult") -> str:
        output = self.render_start(form)
        for field in form.sorted_fields():
            field_result = result.field(field.name, no_die=True)
            if field_result is None:
                field_result = field.result_from_default()
            output += render_widget(field, field_result)
        output += self.render_end(form)
        return output

    def render_start(self, form: "Form") -> str:
        f = form.render_filter
        output = "<form "
        if form.action:
            output += f'action="{f(form.action)}" '
        if form.name:
            output += f'id="{f(form.name)}" '
        if form.http_method:
            output += f'method="{f(form.http_method)}"'
        output += ">\n"
        if form.config.auto_fieldset:
            output += '<fieldset class="main_fieldset">'
        return output

    def render_end(self, form: "Form") -> str:
        output = ""
        if form.config.auto_fieldset:
            output += "</fieldset>"
        output += "</form>\n"
        return output
