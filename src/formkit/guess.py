"""Field type guessing for ``auto_required`` / ``auto_optional`` lists.

The default guesser works from naming conventions only. Names it cannot
classify return ``None``, which makes form construction fail with
``FieldTypeError`` instead of silently picking a type. Forms that know
better (e.g. from a database schema) set ``type_guesser``::

    class ProfileForm(Form):
        type_guesser = staticmethod(lambda name: "Text")
        field_list = {"auto_optional": ["nickname", "bio"]}
"""

import re
from collections.abc import Callable

type TypeGuesser = Callable[[str], str | None]

# First match wins.
_CONVENTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^submit$"), "Submit"),
    (re.compile(r"^password|_password$"), "Password"),
    (re.compile(r"^id$|_id$"), "Hidden"),
    (re.compile(r"^(is|has|can)_|_flag$|^remember_me$|^active$|^enabled$"), "Checkbox"),
    (re.compile(r"^(age|count|quantity|year|position)$|_count$"), "Integer"),
    (re.compile(r"email|name|title|phone|address|street|city|zip|comment|description|subject"), "Text"),
)


def guess_field_type(name: str) -> str | None:
    """Guess a field type tag from a field *name*, or ``None``."""
    leaf = name.rsplit(".", 1)[-1].lower()
    for pattern, tag in _CONVENTIONS:
        if pattern.search(leaf):
            return tag
    return None
