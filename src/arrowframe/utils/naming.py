"""Helpers to pick, quote and count names.

Column keys are plain strings, so whenever a new key has to be
invented (a blank key at construction time, or the index column
of a transposed frame) we have to make sure it doesn't collide
with the keys that are already in use.

>>> first_unused("name", {"name1", "name2"})
'name3'
>>> pluralize(1, "Vector")
'1 Vector'
>>> pluralize(2, "Vector")
'2 Vectors'
"""

import re
from typing import Container

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def first_unused(base: str, taken: Container[str]) -> str:
    """Return the first name in ``base1, base2, ...`` not in ``taken``."""
    counter = 1
    while f"{base}{counter}" in taken:
        counter += 1
    return f"{base}{counter}"


def is_blank(key: str) -> bool:
    """A key is blank when it's empty or made only of whitespace."""
    return not key.strip()


def normalize_keys(keys: list[str]) -> list[str]:
    """Replace blank keys with ``unnamed1``, ``unnamed2``, ...

    Explicit keys are always preserved as they are,
    the synthetic names skip any key that is already used.

    >>> normalize_keys(["", "x", "  "])
    ['unnamed1', 'x', 'unnamed2']
    """
    keys = [str(k) for k in keys]
    taken = set(k for k in keys if not is_blank(k))
    normalized = []
    for key in keys:
        if is_blank(key):
            key = first_unused("unnamed", taken)
            taken.add(key)
        normalized.append(key)
    return normalized


def quote_key(key: str) -> str:
    """Quote a key when it's not a plain identifier.

    >>> quote_key("Sex")
    'Sex'
    >>> quote_key("25%")
    '"25%"'
    """
    if IDENTIFIER_RE.match(key):
        return key
    return '"' + key.replace("\\", "\\\\").replace('"', '\\"') + '"'


def pluralize(count: int, noun: str, plural: str | None = None) -> str:
    """Format ``count noun`` using the plural form when count is not 1."""
    if count != 1:
        noun = plural or noun + "s"
    return f"{count} {noun}"
