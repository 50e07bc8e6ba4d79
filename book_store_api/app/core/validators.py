"""Field presence and ISBN format checks used by the book service."""

import re
from typing import Any, Iterable, List, Mapping

REQUIRED_FIELDS = ("title", "author", "publisher", "publishedDate", "isbn")
# The ISBN is the identity of a record and cannot be changed by an update.
UPDATABLE_FIELDS = REQUIRED_FIELDS[:4]

_ISBN_RE = re.compile(r"[0-9]{13}")


def is_valid_isbn(value: Any) -> bool:
    """Return True iff ``value`` is a string of exactly 13 ASCII digits."""
    return isinstance(value, str) and _ISBN_RE.fullmatch(value) is not None


def is_missing(value: Any) -> bool:
    """A value is missing when it is absent, ``None``, empty or otherwise falsy."""
    return not value


def missing_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> List[str]:
    """Return the names from ``fields`` that are missing or not text in ``payload``."""
    missing = []
    for name in fields:
        value = payload.get(name)
        if is_missing(value) or not isinstance(value, str):
            missing.append(name)
    return missing
