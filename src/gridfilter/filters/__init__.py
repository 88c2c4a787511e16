"""
Filtering System for Record Lists

Filters narrow a list of records by testing one field each. Three kinds
exist: equality, inclusive numeric range and set membership. Filters are
combined conjunctively by folding them over a list in order.

Key Components:
- Filter: Abstract base class for all filters
- FilterChain: Ordered fold of filters
- FilterFactory: Translates descriptors into filters
- RecordSchema: Fail-fast validation of filters against records
"""

from .base import Filter, FilterKind, FilterChain
from .equality import EqualityFilter
from .numeric_range import RangeFilter
from .values_set import ValuesSetFilter
from .factory import FilterFactory
from .validation import RecordSchema

__all__ = [
    "Filter",
    "FilterKind",
    "FilterChain",
    "FilterFactory",
    "EqualityFilter",
    "RangeFilter",
    "ValuesSetFilter",
    "RecordSchema",
]
