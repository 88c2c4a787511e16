"""
Record Access

Records are the elements of the list being filtered. Any mapping or object
works as a record: fields are looked up by key on mappings and by attribute
on everything else. Only ``name`` is expected on every record, as it is the
default search field.

Movie and Category are the record types the grid components display.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List


class _Missing:
    """Sentinel type for a field a record does not have."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def get_field_value(record: Any, field_name: str) -> Any:
    """
    Look up a field on a record.

    Args:
        record: Mapping or object to read from
        field_name: Name of the field

    Returns:
        The field value, or MISSING if the record has no such field
    """
    if isinstance(record, Mapping):
        return record.get(field_name, MISSING)
    return getattr(record, field_name, MISSING)


def is_number(value: Any) -> bool:
    """True for int and float values. Booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_scalar(value: Any) -> bool:
    """True for the comparable scalar types: strings and numbers."""
    return isinstance(value, str) or is_number(value)


def value_category(value: Any) -> str:
    """
    Classify a value for type-sensitive comparisons.

    Returns one of "string", "number", "boolean", "none" or "other".
    Integers and floats share the "number" category so 5 == 5.0 matches,
    while 5 and "5" never do.
    """
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "none"
    return "other"


def scalars_equal(left: Any, right: Any) -> bool:
    """Exact equality without coercion between categories."""
    if not is_scalar(left) or not is_scalar(right):
        return False
    return value_category(left) == value_category(right) and left == right


@dataclass(frozen=True)
class Movie:
    """A movie row in a grid."""

    name: str
    year: int
    rate: float
    awards: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Category:
    """A category row grouping movies."""

    name: str
    movies: List[Movie] = field(default_factory=list)
