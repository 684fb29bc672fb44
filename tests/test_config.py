"""Tests for formkit.config — FormConfig frozen dataclass."""

import pytest

from formkit.config import DEFAULT_CONFIG, FormConfig
from formkit.errors import ConfigurationError


class TestFormConfig:
    def test_defaults(self) -> None:
        cfg = FormConfig()

        assert cfg.auto_fieldset is True
        assert cfg.orphan_fields == "warn"
        assert cfg.verbose is False
        assert cfg.field_namespace is None
        assert cfg.default_field_type == "Text"
        assert cfg.required_message == "This field is required"

    def test_override(self) -> None:
        cfg = FormConfig(auto_fieldset=False, orphan_fields="raise", default_field_type="Integer")

        assert cfg.auto_fieldset is False
        assert cfg.orphan_fields == "raise"
        assert cfg.default_field_type == "Integer"

    def test_frozen(self) -> None:
        cfg = FormConfig()

        with pytest.raises(AttributeError):
            cfg.verbose = True  # type: ignore[misc]

    def test_unknown_orphan_policy(self) -> None:
        with pytest.raises(ConfigurationError, match="orphan_fields"):
            FormConfig(orphan_fields="ignore")

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == FormConfig()
