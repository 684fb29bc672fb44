"""Built-in field types.

Importing this package registers every built-in type tag with
``formkit.registry.field_registry``.
"""

from formkit.fields.base import Field
from formkit.fields.checkbox import Checkbox
from formkit.fields.collection import Fields
from formkit.fields.compound import Compound
from formkit.fields.radio import Radio
from formkit.fields.submit import Submit
from formkit.fields.text import Hidden, Integer, Password, Text

__all__ = [
    "Checkbox",
    "Compound",
    "Field",
    "Fields",
    "Hidden",
    "Integer",
    "Password",
    "Radio",
    "Submit",
    "Text",
]
