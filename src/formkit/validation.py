"""Validators for ``Field.validators``.

A validator receives the field's inflated value, after the required
check and type conversion succeeded, and returns an error message or
``None``::

    class ContactForm(Form):
        email = has_field("Text", validators=[email])
        code = has_field("Text", validators=[min_length(4), matches(r"[A-Z]+")])
        age = has_field("Integer", validators=[in_range(18, 120)])

Text fields hand validators the stripped string and ``Integer`` fields an
``int``, so rules never re-parse raw input. Presence and conversion are the
field's job: ``required=True`` and the field type cover them.
"""

import re
from collections.abc import Callable, Iterable
from typing import Any

type Validator = Callable[[Any], str | None]


def first_error(validators: Iterable[Validator], value: Any) -> str | None:
    """Run *validators* in order and return the first message, if any."""
    for check in validators:
        message = check(value)
        if message is not None:
            return message
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int) -> Validator:
    def check(value: Any) -> str | None:
        if len(str(value)) > n:
            return f"Field should not exceed {n} characters"
        return None

    return check


def min_length(n: int) -> Validator:
    def check(value: Any) -> str | None:
        if len(str(value)) < n:
            return f"Field must be at least {n} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Text shape
# ---------------------------------------------------------------------------

_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s.]+(\.[^@\s.]+)+")


def email(value: Any) -> str | None:
    """One ``@``, no whitespace, and a dotted domain."""
    if _EMAIL_RE.fullmatch(str(value)) is None:
        return "Must be a valid email address"
    return None


def matches(pattern: str | re.Pattern[str], message: str | None = None) -> Validator:
    """The whole value must match *pattern*."""
    compiled = re.compile(pattern)
    error = message or f"Must match pattern: {compiled.pattern}"

    def check(value: Any) -> str | None:
        return None if compiled.fullmatch(str(value)) else error

    return check


def one_of(*choices: Any) -> Validator:
    """Value must equal one of *choices*. Listed in the message as given."""
    error = "Must be one of: " + ", ".join(str(choice) for choice in choices)

    def check(value: Any) -> str | None:
        return None if value in choices else error

    return check


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def in_range(low: int | float | None = None, high: int | float | None = None) -> Validator:
    """Numeric value within ``[low, high]``. Either bound may be None.

    Meant for ``Integer`` fields. A value that is not a number fails.
    """

    def check(value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return "Must be a number"
        if low is not None and value < low:
            return f"Value must be at least {low}"
        if high is not None and value > high:
            return f"Value must be at most {high}"
        return None

    return check
