"""Display-string coercion for values bound from template attributes."""

from collections.abc import Iterable
from typing import Any


def get_string(value: Any, default: str = "") -> str:
    """
    Convert an arbitrary attribute value to a display string.

    None, and objects that cannot be stringified, yield ``default``.
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except (TypeError, ValueError):
        return default


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def to_condition(value: Any) -> bool:
    """
    Interpret a bound condition.

    Strings arrive from JSON and form posts, so only "true" (any case) is true.
    """
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def entries_from_value(value: Any, entry_type: type) -> tuple[Any, ...]:
    """
    Normalise a list-valued marker payload into ``entry_type`` instances.

    ``entry_type.from_value`` returns None for malformed items, which are dropped.
    Strings and other non-iterables yield no entries.
    """
    if value is None or isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return ()
    entries = (entry_type.from_value(item) for item in value)
    return tuple(e for e in entries if e is not None)
