"""Single-line text inputs and their close relatives."""

from typing import Any

from formkit.fields.base import Field
from formkit.registry import register_field
from formkit.result import Result
from formkit.validation import first_error, max_length, min_length


@register_field("Text")
class Text(Field):
    """A single-line text input.

    ``size`` and ``maxlength`` are rendered as attributes; ``maxlength``
    and ``minlength`` are also enforced on submitted input.
    """

    widget = "text"

    def __init__(self, *, size: int = 0, maxlength: int = 0, minlength: int = 0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.size = size
        self.maxlength = maxlength
        self.minlength = minlength

    def validate(self, value: Any, result: Result) -> None:
        checks = []
        if self.maxlength:
            checks.append(max_length(self.maxlength))
        if self.minlength:
            checks.append(min_length(self.minlength))
        error = first_error(checks, self.deflate(value))
        if error is not None:
            result.add_error(error)


@register_field("Password")
class Password(Text):
    """A password input. Submitted values are never filled back in."""

    widget = "password"

    def fif(self, result: Result) -> str:
        return ""


@register_field("Hidden")
class Hidden(Text):
    widget = "hidden"


@register_field("Integer")
class Integer(Text):
    """Text input whose value inflates to ``int``."""

    inflate_message = "Value must be an integer"

    def __init__(self, *, size: int = 8, **kwargs: Any) -> None:
        super().__init__(size=size, **kwargs)

    def inflate(self, raw: Any) -> int:
        return int(str(raw).strip())
