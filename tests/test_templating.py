"""Tests for formkit.templating — kida filters over form results."""

from kida import Environment

from formkit.declarations import has_field
from formkit.form import Form
from formkit.templating import BUILTIN_FILTERS, field_errors, fif, register_form_filters, render_field


class SearchForm(Form):
    name = "search"
    query = has_field("Text", required=True)
    page = has_field("Integer")


def _make_env() -> Environment:
    return register_form_filters(Environment(autoescape=True))


def _render(env: Environment, source: str, **ctx: object) -> str:
    tpl = env.from_string(source)
    return tpl.render(ctx).strip()


# ---------------------------------------------------------------------------
# Plain filter functions
# ---------------------------------------------------------------------------


class TestFif:
    def test_reads_result(self) -> None:
        result = SearchForm().process({"query": "kida"})
        assert fif(result, "query") == "kida"

    def test_unknown_field(self) -> None:
        result = SearchForm().process({"query": "kida"})
        assert fif(result, "missing") == ""

    def test_not_a_result(self) -> None:
        assert fif(None, "query") == ""


class TestFieldErrors:
    def test_from_result(self) -> None:
        result = SearchForm().process({})
        assert field_errors(result, "query") == ["This field is required"]
        assert field_errors(result, "page") == []

    def test_from_error_dict(self) -> None:
        errors = SearchForm().process({"query": "x", "page": "two"}).error_dict
        assert field_errors(errors, "page") == ["Value must be an integer"]

    def test_none_returns_empty(self) -> None:
        assert field_errors(None, "query") == []


class TestRenderField:
    def test_uses_current_result(self) -> None:
        form = SearchForm()
        form.process({"query": "hello"})
        assert 'value="hello"' in render_field(form, "query")

    def test_before_processing(self) -> None:
        assert 'value=""' in render_field(SearchForm(), "query")


def test_builtin_filters_registered() -> None:
    assert set(BUILTIN_FILTERS) == {"field_errors", "fif", "render_field", "render_form"}


# ---------------------------------------------------------------------------
# Through a kida Environment
# ---------------------------------------------------------------------------


class TestKidaIntegration:
    def test_fif_filter_is_escaped(self) -> None:
        env = _make_env()
        result = SearchForm().process({"query": "<b>x</b>"})
        out = _render(env, '<input value="{{ result | fif("query") }}">', result=result)
        assert "<b>" not in out
        assert "&lt;b&gt;" in out

    def test_rendered_form_not_double_escaped(self) -> None:
        env = _make_env()
        form = SearchForm()
        out = _render(env, "{{ form | render_form }}", form=form)
        assert out.startswith('<form id="search" method="post">')
        assert "&lt;form" not in out

    def test_render_form_global(self) -> None:
        env = _make_env()
        out = _render(env, "{{ render_form(form) }}", form=SearchForm())
        assert '<input type="text" name="query"' in out
