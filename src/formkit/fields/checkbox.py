"""Checkbox field."""

from collections.abc import Mapping
from typing import Any

from formkit.fields.base import Field
from formkit.registry import register_field
from formkit.result import NO_INPUT, Result


@register_field("Checkbox")
class Checkbox(Field):
    """A single checkbox.

    Browsers omit unchecked boxes from the submission, so a missing
    parameter is read as ``input_without_param``. The box renders checked
    when the fill-in-form value equals ``checkbox_value`` exactly.
    """

    widget = "checkbox"

    def __init__(self, *, checkbox_value: Any = "1", input_without_param: Any = "0", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.checkbox_value = checkbox_value
        self.input_without_param = input_without_param

    def result_from_input(self, params: Mapping[str, Any]) -> Result:
        raw = params.get(self.html_name, NO_INPUT)
        if raw is NO_INPUT:
            raw = self.input_without_param
        return Result(self.name, self, input=raw)

    def is_checked(self, result: Result) -> bool:
        return self.fif(result) == str(self.checkbox_value)

    def deflate(self, value: Any) -> str:
        if value is True:
            return str(self.checkbox_value)
        if value is False or value is None:
            return str(self.input_without_param)
        return str(value)

    def validate_field(self, result: Result) -> None:
        result.errors.clear()
        result.clear_value()
        checked = result.has_input and self.is_checked(result)
        if self.required and not checked:
            result.add_error(self.required_message)
            return
        result.value = self.checkbox_value if checked else self.input_without_param
