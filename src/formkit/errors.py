"""Formkit exception hierarchy.

Shared across the builder, the field types, and the widgets so every
module raises and catches the same types. Validation failures are not
exceptions: they are recorded on ``Result.errors``.
"""


class FormkitError(Exception):
    """Base for all formkit-specific errors."""


class ConfigurationError(FormkitError):
    """Raised when a form cannot be constructed.

    Typically raised from ``Form.build_fields()`` while the form is being
    instantiated. Construction errors are fatal: the form is unusable.
    """


class FieldTypeError(ConfigurationError):
    """A field type tag is not registered, or could not be guessed."""


class FieldClassError(ConfigurationError):
    """A field class could not be imported or instantiated."""


class OrphanFieldError(ConfigurationError):
    """A dotted field names a parent that does not exist.

    Only raised when the form's ``orphan_fields`` policy is ``"raise"``.
    """

    def __init__(self, full_name: str, parent_path: str) -> None:
        self.full_name = full_name
        self.parent_path = parent_path
        super().__init__(
            f"Field {full_name!r} has no parent field {parent_path!r}"
        )


class FieldNotFound(FormkitError, LookupError):  # noqa: N818
    """``field(name)`` matched nothing."""

    def __init__(self, name: str, owner: str = "") -> None:
        self.name = name
        where = f" in {owner!r}" if owner else ""
        super().__init__(f"Field {name!r} not found{where}")
