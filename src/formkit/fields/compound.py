"""Compound field — a field that owns child fields.

Children come from dotted declarations on the form::

    class OrderForm(Form):
        address = has_field("Compound")
        street = has_field("Text", name="address.street")
        city = has_field("Text", name="address.city", required=True)

or from ``has_field`` declarations on a ``Compound`` subclass registered
under its own tag. The compound validates its children itself; the form's
validation pass skips them.
"""

from collections.abc import Mapping
from typing import Any

from formkit.declarations import Declarative
from formkit.fields.base import Field, _lookup
from formkit.fields.collection import Fields
from formkit.registry import register_field
from formkit.result import Result


@register_field("Compound")
class Compound(Fields, Field, Declarative):
    widget = "compound"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.fields: list[Field] = []
        self.build_fields()

    # -- Results --

    def result_from_input(self, params: Mapping[str, Any]) -> Result:
        result = Result(self.name, self)
        for field in self.fields:
            result.add_child(field.result_from_input(params))
        return result

    def result_from_object(self, obj: Any) -> Result:
        result = Result(self.name, self)
        nested = _lookup(obj, self.name, None)
        for field in self.fields:
            result.add_child(field.result_from_object(nested))
        return result

    def result_from_default(self) -> Result:
        result = Result(self.name, self)
        for field in self.fields:
            result.add_child(field.result_from_default())
        return result

    def fif(self, result: Result) -> str:
        return ""

    # -- Validation --

    def validate_field(self, result: Result) -> None:
        """Validate the children, then collect their values into a dict."""
        result.errors.clear()
        result.clear_value()
        self.fields_validate(result)
        if any(child.has_errors for child in result.children.values()):
            return

        value = {
            name: child.value
            for name, child in result.children.items()
            if child.has_value and not (child.field_def is not None and child.field_def.writeonly)
        }
        if self.required and not any(v not in (None, "") for v in value.values()):
            result.add_error(self.required_message)
            return
        result.value = value
