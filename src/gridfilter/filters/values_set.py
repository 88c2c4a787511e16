"""
Set membership filtering for records.

Keeps records whose field holds one of a collection of scalar values.
"""

from collections.abc import Iterable
from typing import Any, Dict, List, Union

from .base import Filter, FilterKind
from gridfilter.core.exceptions import ErrorCode, malformed_descriptor_error
from gridfilter.records import get_field_value, is_scalar, value_category


class ValuesSetFilter(Filter):
    """
    Filter records whose field value is a member of a set of values.

    Membership is type-sensitive like equality. Duplicate values are
    collapsed and an empty collection matches nothing.
    """

    kind = FilterKind.VALUES_SET

    def __init__(self, field_name: str, values: Iterable[Union[str, int, float]]):
        """
        Initialize the values set filter.

        Args:
            field_name: Field to compare
            values: Acceptable strings and/or numbers
        """
        super().__init__(field_name)
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise malformed_descriptor_error(
                f"Values for '{field_name}' must be a list of strings or numbers, got {values!r}",
                error_code=ErrorCode.DESCRIPTOR_TYPE_MISMATCH
            )

        self.values: List[Union[str, int, float]] = []
        self._keys = set()
        for value in values:
            if not is_scalar(value):
                raise malformed_descriptor_error(
                    f"Values for '{field_name}' must be strings or numbers, got {value!r}",
                    error_code=ErrorCode.DESCRIPTOR_TYPE_MISMATCH
                )
            key = (value_category(value), value)
            if key not in self._keys:
                self._keys.add(key)
                self.values.append(value)

    @property
    def name(self) -> str:
        return "values_set"

    @property
    def description(self) -> str:
        return f"{self.field_name} in {self.values!r}"

    def matches(self, record: Any) -> bool:
        value = get_field_value(record, self.field_name)
        return is_scalar(value) and (value_category(value), value) in self._keys

    def to_descriptor(self) -> Dict[str, Any]:
        return {"fieldName": self.field_name, "values": list(self.values)}
