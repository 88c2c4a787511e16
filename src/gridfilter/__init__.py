"""
GridFilter - in-memory filtering for searchable, filterable data grids.

Build an EntityList over a list of records, then narrow it with search
terms and filter descriptors coming from UI state.
"""

from gridfilter.entity_list import EntityList, MovieList, CategoryList
from gridfilter.descriptors import (
    EqualityDescriptor,
    RangeDescriptor,
    ValuesSetDescriptor,
    FilterDescriptor,
    parse_descriptor,
    parse_descriptors,
)
from gridfilter.filters import (
    Filter,
    FilterKind,
    FilterChain,
    FilterFactory,
    EqualityFilter,
    RangeFilter,
    ValuesSetFilter,
)
from gridfilter.records import Movie, Category, MISSING, get_field_value
from gridfilter.core.exceptions import (
    GridFilterError,
    DescriptorError,
    MalformedDescriptorError,
    UnknownDescriptorKindError,
    InvalidFieldError,
)

__version__ = "0.1.0"

__all__ = [
    "EntityList",
    "MovieList",
    "CategoryList",
    "EqualityDescriptor",
    "RangeDescriptor",
    "ValuesSetDescriptor",
    "FilterDescriptor",
    "parse_descriptor",
    "parse_descriptors",
    "Filter",
    "FilterKind",
    "FilterChain",
    "FilterFactory",
    "EqualityFilter",
    "RangeFilter",
    "ValuesSetFilter",
    "Movie",
    "Category",
    "MISSING",
    "get_field_value",
    "GridFilterError",
    "DescriptorError",
    "MalformedDescriptorError",
    "UnknownDescriptorKindError",
    "InvalidFieldError",
]
