"""
Numeric range filtering for records.

Keeps records whose field holds a number within inclusive bounds. Bounds are
taken as given: a range whose low bound exceeds its high bound matches
nothing.
"""

from typing import Any, Dict, Union

from .base import Filter, FilterKind
from gridfilter.core.exceptions import ErrorCode, malformed_descriptor_error
from gridfilter.records import get_field_value, is_number


Number = Union[int, float]


class RangeFilter(Filter):
    """
    Filter records whose numeric field falls within [low, high].

    Both bounds are inclusive. Non-numeric field values, including booleans
    and numeric strings, never match.
    """

    kind = FilterKind.RANGE

    def __init__(self, field_name: str, low: Number, high: Number):
        """
        Initialize the range filter.

        Args:
            field_name: Field to compare
            low: Inclusive lower bound
            high: Inclusive upper bound
        """
        super().__init__(field_name)
        for label, bound in (("low", low), ("high", high)):
            if bound is None:
                raise malformed_descriptor_error(
                    f"Range filter on '{field_name}' is missing its {label} bound",
                    error_code=ErrorCode.DESCRIPTOR_MISSING_BOUND
                )
            if not is_number(bound):
                raise malformed_descriptor_error(
                    f"Range {label} bound for '{field_name}' must be a number, got {bound!r}",
                    error_code=ErrorCode.DESCRIPTOR_TYPE_MISMATCH
                )
        self.low = low
        self.high = high

        if low > high:
            self.logger.debug(f"Empty range on '{field_name}': {low} > {high}")

    @property
    def name(self) -> str:
        return "range"

    @property
    def description(self) -> str:
        return f"{self.low} <= {self.field_name} <= {self.high}"

    def matches(self, record: Any) -> bool:
        value = get_field_value(record, self.field_name)
        return is_number(value) and self.low <= value <= self.high

    def to_descriptor(self) -> Dict[str, Any]:
        return {
            "kind": "range",
            "fieldName": self.field_name,
            "value": self.low,
            "valueTo": self.high,
        }
