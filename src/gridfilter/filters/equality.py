"""
Equality filtering for records.

Keeps records whose field holds exactly the configured scalar. Comparison is
type-sensitive: the number 5 never matches the string "5".
"""

from typing import Any, Dict, Union

from .base import Filter, FilterKind
from gridfilter.core.exceptions import ErrorCode, malformed_descriptor_error
from gridfilter.records import get_field_value, is_scalar, scalars_equal


class EqualityFilter(Filter):
    """
    Filter records whose field equals a single value.

    Records that lack the field, or hold a non-scalar value in it, never
    match.
    """

    kind = FilterKind.EQUALITY

    def __init__(self, field_name: str, value: Union[str, int, float]):
        """
        Initialize the equality filter.

        Args:
            field_name: Field to compare
            value: String or number the field must equal
        """
        super().__init__(field_name)
        if not is_scalar(value):
            raise malformed_descriptor_error(
                f"Equality value for '{field_name}' must be a string or number, got {value!r}",
                error_code=ErrorCode.DESCRIPTOR_TYPE_MISMATCH
            )
        self.value = value

    @property
    def name(self) -> str:
        return "equality"

    @property
    def description(self) -> str:
        return f"{self.field_name} == {self.value!r}"

    def matches(self, record: Any) -> bool:
        return scalars_equal(get_field_value(record, self.field_name), self.value)

    def to_descriptor(self) -> Dict[str, Any]:
        return {"kind": "equality", "fieldName": self.field_name, "value": self.value}
