"""Formkit — declarative HTML forms.

Forms are classes with typed fields. Fields are built once per form
instance, validated against submitted parameters into a fresh result, and
rendered to HTML through pluggable widgets.

Basic usage::

    from formkit import Form, has_field

    class ContactForm(Form):
        name = "contact"
        email = has_field("Text", required=True)
        message = has_field("Text", maxlength=500)
        submit = has_field("Submit", value="Send")

    form = ContactForm()
    result = form.process({"email": "a@example.com", "message": "Hi"})
    if result:
        send(result.values)
    html = form.render()
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Checkbox",
    "Compound",
    "ConfigurationError",
    "Field",
    "FieldClassError",
    "FieldNotFound",
    "FieldTypeError",
    "Form",
    "FormConfig",
    "FormResult",
    "FormRole",
    "FormkitError",
    "Hidden",
    "Integer",
    "OrphanFieldError",
    "Password",
    "Radio",
    "Result",
    "Submit",
    "Text",
    "has_field",
    "register_field",
    "register_widget",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "Form": "formkit.form",
    "FormConfig": "formkit.config",
    "Result": "formkit.result",
    "FormResult": "formkit.result",
    "FormRole": "formkit.declarations",
    "has_field": "formkit.declarations",
    "register_field": "formkit.registry",
    "register_widget": "formkit.widgets",
    "Field": "formkit.fields",
    "Text": "formkit.fields",
    "Password": "formkit.fields",
    "Hidden": "formkit.fields",
    "Integer": "formkit.fields",
    "Checkbox": "formkit.fields",
    "Submit": "formkit.fields",
    "Radio": "formkit.fields",
    "Compound": "formkit.fields",
    "FormkitError": "formkit.errors",
    "ConfigurationError": "formkit.errors",
    "FieldTypeError": "formkit.errors",
    "FieldClassError": "formkit.errors",
    "FieldNotFound": "formkit.errors",
    "OrphanFieldError": "formkit.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formkit`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
