"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation, shared safely
between every instance of a form class.
"""

from dataclasses import dataclass

from formkit.errors import ConfigurationError

ORPHAN_POLICIES = frozenset({"warn", "drop", "raise"})


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Form configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        class SignupForm(Form):
            config = FormConfig(auto_fieldset=False, orphan_fields="raise")
    """

    # Rendering
    auto_fieldset: bool = True

    # Dotted fields whose parent is missing: "warn", "drop" or "raise"
    orphan_fields: str = "warn"

    # Log field building at INFO instead of DEBUG
    verbose: bool = False

    # Field resolution
    field_namespace: str | None = None  # Module prefix for "+Name" type tags
    default_field_type: str = "Text"

    # Validation
    required_message: str = "This field is required"

    def __post_init__(self) -> None:
        if self.orphan_fields not in ORPHAN_POLICIES:
            allowed = ", ".join(sorted(ORPHAN_POLICIES))
            msg = f"Unknown orphan_fields policy {self.orphan_fields!r} (expected one of: {allowed})"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = FormConfig()
