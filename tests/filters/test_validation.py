"""
Tests for RecordSchema validation.

This module tests fail-fast checks of filters against the records they
will be applied to.
"""

import pytest

from gridfilter.core.exceptions import ErrorCode, InvalidFieldError, MalformedDescriptorError
from gridfilter.filters.equality import EqualityFilter
from gridfilter.filters.numeric_range import RangeFilter
from gridfilter.filters.validation import RecordSchema
from gridfilter.filters.values_set import ValuesSetFilter


class TestRecordSchema:
    """Test RecordSchema inference and validation."""

    def test_field_categories(self, movie_dicts):
        """Test value categories inferred per field."""
        schema = RecordSchema(movie_dicts)

        assert schema.field_categories("name") == {"string"}
        assert schema.field_categories("rate") == {"number"}
        assert schema.field_categories("awards") == {"other"}
        assert schema.field_categories("director") is None

    def test_none_values_ignored(self):
        """Test None does not count as a category."""
        schema = RecordSchema([{"year": None}, {"year": 2000}])

        assert schema.field_categories("year") == {"number"}

    def test_available_fields(self, movies):
        """Test field discovery on dataclass records."""
        assert RecordSchema(movies).available_fields() == ["name", "year", "rate", "awards"]

    def test_missing_field(self, movie_dicts):
        """Test a filter on an unknown field fails with the field list."""
        schema = RecordSchema(movie_dicts)

        with pytest.raises(InvalidFieldError) as exc_info:
            schema.validate(EqualityFilter("director", "Scott"))

        error = exc_info.value
        assert error.error_code == ErrorCode.FIELD_NOT_FOUND
        assert error.field_name == "director"
        assert "genre" in error.context.user_context["available_fields"]
        assert "Available fields" in error.get_user_message()

    def test_range_on_text_field(self, movie_dicts):
        """Test range filters need numeric fields."""
        with pytest.raises(InvalidFieldError) as exc_info:
            RecordSchema(movie_dicts).validate(RangeFilter("name", 1, 2))

        assert exc_info.value.error_code == ErrorCode.FIELD_NOT_NUMERIC

    def test_equality_on_list_field(self, movie_dicts):
        """Test equality on a non-comparable field is rejected."""
        with pytest.raises(InvalidFieldError) as exc_info:
            RecordSchema(movie_dicts).validate(EqualityFilter("awards", "Oscar"))

        assert exc_info.value.error_code == ErrorCode.FIELD_NOT_COMPARABLE

    def test_value_type_mismatch(self, movie_dicts):
        """Test a string value for a numeric field is a malformed descriptor."""
        schema = RecordSchema(movie_dicts)

        with pytest.raises(MalformedDescriptorError):
            schema.validate(EqualityFilter("year", "1979"))
        with pytest.raises(MalformedDescriptorError):
            schema.validate(ValuesSetFilter("year", [1979, "1995"]))

    def test_valid_filters_pass(self, movie_dicts):
        """Test compatible filters validate silently."""
        schema = RecordSchema(movie_dicts)

        schema.validate(EqualityFilter("name", "Up"))
        schema.validate(RangeFilter("rate", 7, 9))
        schema.validate(ValuesSetFilter("genre", ["sci-fi", "horror"]))

    def test_empty_records_skip_validation(self):
        """Test nothing is checked against an empty list."""
        RecordSchema([]).validate(RangeFilter("anything", 1, 2))

    def test_all_none_field_accepts_any_filter(self):
        """Test a field that only holds None carries no type to check."""
        RecordSchema([{"score": None}]).validate(RangeFilter("score", 1, 2))
