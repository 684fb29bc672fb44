"""Kida template integration.

For apps that lay out forms in templates instead of using the widgets
for the whole form. Registers filters and globals on a kida Environment::

    from kida import Environment
    from formkit.templating import register_form_filters

    env = Environment(autoescape=True)
    register_form_filters(env)

    {{ result | fif("email") }}
    {% for msg in result | field_errors("email") %}<span>{{ msg }}</span>{% end %}
    {{ form | render_field("email") }}
    {{ form | render_form }}  or  {{ render_form(form) }}
"""

from typing import Any

from kida import Environment
from kida.template import Markup

from formkit.form import Form
from formkit.result import Result


def fif(result: Any, field_name: str) -> str:
    """Fill-in-form string for *field_name*, or ``""`` when unknown."""
    if not isinstance(result, Result):
        return ""
    field_result = result.field(field_name, no_die=True)
    return field_result.fif if field_result is not None else ""


def field_errors(result: Any, field_name: str) -> list[str]:
    """Error messages for *field_name*.

    Accepts a ``Result`` or an ``{name: [messages]}`` dict, returning an
    empty list when there is nothing to show.
    """
    if isinstance(result, Result):
        field_result = result.field(field_name, no_die=True)
        return list(field_result.errors) if field_result is not None else []
    if isinstance(result, dict):
        val = result.get(field_name, [])
        return list(val) if val else []
    return []


def render_field(form: Form, field_name: str) -> Markup:
    """Render one field of *form* with its widget and current result."""
    field = form.field(field_name)
    result = form.result.field(field_name, no_die=True) if form.result is not None else None
    return field.render(result)


def render_form(form: Form) -> Markup:
    return form.render()


BUILTIN_FILTERS: dict[str, Any] = {
    "field_errors": field_errors,
    "fif": fif,
    "render_field": render_field,
    "render_form": render_form,
}

BUILTIN_GLOBALS: dict[str, Any] = {
    "render_form": render_form,
}


def register_form_filters(env: Environment) -> Environment:
    """Install formkit's filters and globals on *env* and return it."""
    env.update_filters(BUILTIN_FILTERS)
    for name, value in BUILTIN_GLOBALS.items():
        env.add_global(name, value)
    return env
