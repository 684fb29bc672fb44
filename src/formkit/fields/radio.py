"""Radio field — placeholder for atomic radio buttons.

Not used by any built-in form. Renders a single ``type="radio"`` input
whose ``value`` is ``radio_value``.
"""

from typing import Any

from formkit.fields.base import Field
from formkit.registry import register_field


@register_field("Radio")
class Radio(Field):
    widget = "radio"

    def __init__(self, *, radio_value: Any = 1, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.radio_value = radio_value
