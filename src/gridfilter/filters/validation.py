"""
Filter Validation

Checks filters against the records they are about to narrow, so that a
filter on a missing field, or a range over text, fails with a descriptive
error instead of quietly producing an empty result.

The schema is inferred from the records themselves: a field exists when at
least one record carries it, and its type is the set of value categories
observed across all records (see ``gridfilter.records.value_category``).
"""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, List, Optional, Sequence

from gridfilter.core.exceptions import (
    ErrorCode, invalid_field_error, malformed_descriptor_error
)
from gridfilter.filters.base import Filter, FilterKind
from gridfilter.records import MISSING, get_field_value, value_category


logger = logging.getLogger(__name__)

COMPARABLE_CATEGORIES = frozenset({"string", "number"})


def _field_names(record: Any) -> List[str]:
    """Best-effort list of the field names a record exposes."""
    if isinstance(record, Mapping):
        return [str(key) for key in record.keys()]
    if dataclasses.is_dataclass(record):
        return [f.name for f in dataclasses.fields(record)]
    model_fields = getattr(type(record), 'model_fields', None)
    if isinstance(model_fields, dict):
        return list(model_fields)
    try:
        return [name for name in vars(record) if not name.startswith('_')]
    except TypeError:
        return []


class RecordSchema:
    """
    Field information inferred from a fixed list of records.

    Lookups are computed on first use and cached, which is safe because the
    records never change after construction.
    """

    def __init__(self, records: Sequence[Any]):
        self._records = records
        self._categories: Dict[str, Optional[FrozenSet[str]]] = {}

    @property
    def is_empty(self) -> bool:
        return len(self._records) == 0

    def field_categories(self, field_name: str) -> Optional[FrozenSet[str]]:
        """
        Value categories observed for a field.

        Returns None when no record carries the field. ``"none"`` values are
        left out, so a field holding only None yields an empty set.
        """
        if field_name not in self._categories:
            present = False
            categories = set()
            for record in self._records:
                value = get_field_value(record, field_name)
                if value is MISSING:
                    continue
                present = True
                category = value_category(value)
                if category != "none":
                    categories.add(category)
            self._categories[field_name] = frozenset(categories) if present else None
        return self._categories[field_name]

    def available_fields(self) -> List[str]:
        """Field names seen on the records, in first-seen order."""
        seen: Dict[str, None] = {}
        for record in self._records[:50]:
            for name in _field_names(record):
                seen.setdefault(name, None)
        return list(seen)

    def validate(self, filter_instance: Filter) -> None:
        """
        Check that a filter can meaningfully run against these records.

        Nothing is checked when there are no records.

        Raises:
            InvalidFieldError: If the field is absent or its values cannot be
                compared the way the filter needs
            MalformedDescriptorError: If a filter value's type does not match
                the field's values
        """
        if self.is_empty:
            return

        field_name = filter_instance.field_name
        categories = self.field_categories(field_name)
        if categories is None:
            raise invalid_field_error(
                f"Field '{field_name}' does not exist on the records",
                field=field_name,
                error_code=ErrorCode.FIELD_NOT_FOUND,
                available_fields=self.available_fields()
            )

        # Fields holding only None carry no type information.
        if not categories:
            return

        if filter_instance.kind is FilterKind.RANGE:
            if not categories <= {"number"}:
                raise invalid_field_error(
                    f"Range filter needs a numeric field, but '{field_name}' holds "
                    f"{', '.join(sorted(categories))} values",
                    field=field_name,
                    error_code=ErrorCode.FIELD_NOT_NUMERIC
                )
            return

        if filter_instance.kind is FilterKind.EQUALITY:
            values = [filter_instance.value]
        elif filter_instance.kind is FilterKind.VALUES_SET:
            values = filter_instance.values
        else:
            raise ValueError(f"Unsupported filter kind: {filter_instance.kind}")

        if not categories & COMPARABLE_CATEGORIES:
            raise invalid_field_error(
                f"Field '{field_name}' holds {', '.join(sorted(categories))} values, "
                f"which cannot be compared to strings or numbers",
                field=field_name,
                error_code=ErrorCode.FIELD_NOT_COMPARABLE
            )

        for value in values:
            if value_category(value) not in categories:
                raise malformed_descriptor_error(
                    f"Value {value!r} for '{field_name}' is a {value_category(value)}, "
                    f"but the field holds {', '.join(sorted(categories))} values",
                    error_code=ErrorCode.DESCRIPTOR_TYPE_MISMATCH
                )

        logger.debug(f"Validated {filter_instance.description}")
