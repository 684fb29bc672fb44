"""Submit button field."""

from collections.abc import Mapping
from typing import Any

from formkit.fields.base import Field
from formkit.registry import register_field
from formkit.result import Result


@register_field("Submit")
class Submit(Field):
    """A submit button with a static value::

        submit = has_field("Submit", value="Save changes")

    The value never comes from input or an init object, and the field is
    left out of ``fif`` and ``values``.
    """

    widget = "submit"
    has_static_value = True
    writeonly = True
    noupdate = True

    def __init__(self, *, value: str = "Save", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.value = value

    def _static_result(self) -> Result:
        result = Result(self.name, self)
        result.value = self.value
        return result

    def result_from_input(self, params: Mapping[str, Any]) -> Result:
        return self._static_result()

    def result_from_object(self, obj: Any) -> Result:
        return self._static_result()

    def result_from_default(self) -> Result:
        return self._static_result()

    def validate_field(self, result: Result) -> None:
        pass

    def fif(self, result: Result) -> str:
        return str(self.value)
