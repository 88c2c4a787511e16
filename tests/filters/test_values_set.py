"""
Tests for ValuesSetFilter functionality.

This module tests set membership filtering.
"""

import pytest

from gridfilter.core.exceptions import MalformedDescriptorError
from gridfilter.filters.base import FilterKind
from gridfilter.filters.values_set import ValuesSetFilter


class TestValuesSetFilter:
    """Test ValuesSetFilter functionality."""

    def test_membership(self):
        """Test {"A", "B"} keeps A and B and drops C."""
        records = [{"g": "A"}, {"g": "C"}, {"g": "B"}]

        result = ValuesSetFilter("g", ["A", "B"]).apply(records)

        assert result == [records[0], records[2]]

    def test_order_of_values_irrelevant(self):
        """Test membership does not depend on the order of the values."""
        records = [{"g": "A"}, {"g": "B"}, {"g": "C"}]

        assert ValuesSetFilter("g", ["B", "A"]).apply(records) == records[:2]

    def test_duplicates_are_harmless(self):
        """Test duplicated values neither fail nor duplicate records."""
        records = [{"g": "A"}, {"g": "B"}]

        filter_obj = ValuesSetFilter("g", ["A", "A", "A"])

        assert filter_obj.apply(records) == [records[0]]
        assert filter_obj.values == ["A"]

    def test_type_sensitive_membership(self):
        """Test numeric values do not match their string forms."""
        records = [{"year": 2010}, {"year": "2010"}, {"year": 2010.0}]

        assert ValuesSetFilter("year", [2010]).apply(records) == [records[0], records[2]]

    def test_empty_values_match_nothing(self):
        """Test an empty collection keeps no records."""
        assert ValuesSetFilter("g", []).apply([{"g": "A"}]) == []

    def test_unhashable_field_value_excluded(self):
        """Test list-valued fields are excluded without raising."""
        records = [{"g": ["A"]}, {"g": "A"}]

        assert ValuesSetFilter("g", ["A"]).apply(records) == [records[1]]

    def test_accepts_tuples_and_sets(self):
        """Test any non-string iterable of values is accepted."""
        assert ValuesSetFilter("g", ("A", "B")).values == ["A", "B"]
        assert sorted(ValuesSetFilter("g", {"A", "B"}).values) == ["A", "B"]

    def test_rejects_string_as_values(self):
        """Test a bare string is not treated as a collection of characters."""
        with pytest.raises(MalformedDescriptorError):
            ValuesSetFilter("g", "AB")

    def test_rejects_non_scalar_member(self):
        """Test members must be strings or numbers."""
        with pytest.raises(MalformedDescriptorError):
            ValuesSetFilter("g", ["A", None])

    def test_properties(self):
        """Test name, kind and descriptor, which carries no kind tag."""
        filter_obj = ValuesSetFilter("name", ["X", "Y"])

        assert filter_obj.kind is FilterKind.VALUES_SET
        assert filter_obj.name == "values_set"
        assert filter_obj.to_descriptor() == {"fieldName": "name", "values": ["X", "Y"]}
