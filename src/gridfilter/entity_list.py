"""
Entity List Pipeline

EntityList owns a fixed list of records and an ordered chain of active
filters. Searches and filter descriptors append to the chain; an empty
descriptor batch resets it. Every operation recomputes the result from the
original records by folding the whole chain over them.

Instances are meant to be owned by a single UI component; concurrent
mutation from several threads must be serialised by the caller.
"""

import logging
from typing import Generic, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from gridfilter.core.config.models import FilterConfig
from gridfilter.descriptors import FilterDescriptor
from gridfilter.filters.base import Filter, FilterChain
from gridfilter.filters.equality import EqualityFilter
from gridfilter.filters.factory import FilterFactory
from gridfilter.filters.validation import RecordSchema
from gridfilter.records import Category, Movie


T = TypeVar("T")

SearchValue = Union[str, int, float]


class EntityList(Generic[T]):
    """
    Stateful filter pipeline over an immutable list of records.

    The filtered result always equals the original records with every
    active filter applied in insertion order. A failed call leaves the
    active filters untouched.

    Args:
        records: Records to filter; copied once and never modified
        config: Filter configuration (defaults to FilterConfig())
    """

    def __init__(self, records: Iterable[T], config: Optional[FilterConfig] = None):
        self._original: Tuple[T, ...] = tuple(records)
        self.config = config or FilterConfig()
        self.filters = FilterChain()
        self._factory = FilterFactory(self.config)
        self._schema = RecordSchema(self._original)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def original(self) -> List[T]:
        """The records the list was built with, unfiltered."""
        return list(self._original)

    @property
    def active_filters(self) -> Tuple[Filter, ...]:
        """Snapshot of the active filters in application order."""
        return tuple(self.filters)

    @property
    def filtered(self) -> List[T]:
        """Current result of the active filters."""
        return self.apply_filters()

    def apply_search_value(self, value: SearchValue, field_name: Optional[str] = None) -> List[T]:
        """
        Add an equality filter for a search term and recompute.

        Searches accumulate: each call adds another filter on top of the
        ones already active.

        Args:
            value: String or number the field must equal
            field_name: Field to search (defaults to the configured search
                field, ``name``)

        Returns:
            Filtered records
        """
        if field_name is None:
            field_name = self.config.default_search_field
        search_filter = EqualityFilter(field_name, value)
        self._validate([search_filter])

        self.filters.append(search_filter)
        self.logger.debug(f"Search added: {search_filter.description}")
        return self.apply_filters()

    def apply_filters_value(self, descriptors: Sequence[Union[FilterDescriptor, Mapping]]) -> List[T]:
        """
        Apply a batch of filter descriptors.

        An empty batch clears every active filter, including searches, and
        returns the original records. Otherwise each descriptor becomes a
        filter appended after the ones already active.

        Args:
            descriptors: Descriptor models or mappings in the external shape

        Returns:
            Filtered records

        Raises:
            UnknownDescriptorKindError: If a tagged descriptor has an unknown kind
            MalformedDescriptorError: If a descriptor is incomplete or mistyped
            InvalidFieldError: If a descriptor names a missing or incompatible field
        """
        descriptors = list(descriptors)
        if not descriptors:
            return self.reset()

        new_filters = self._factory.create_from_descriptors(descriptors)
        self._validate(new_filters)

        self.filters.extend(new_filters)
        self.logger.debug(f"Added {len(new_filters)} filter(s); {len(self.filters)} active")
        return self.apply_filters()

    def reset(self) -> List[T]:
        """Clear every active filter and return the original records."""
        if len(self.filters):
            self.logger.info(f"Clearing {len(self.filters)} active filter(s)")
        self.filters.clear()
        return self.original

    def apply_filters(self) -> List[T]:
        """Fold the active filters over the original records."""
        return self.filters.apply(self._original)

    def _validate(self, filters: List[Filter]) -> None:
        """Check new filters against the records before activating them."""
        if not self.config.validate_fields:
            return
        for filter_instance in filters:
            self._schema.validate(filter_instance)

    def __len__(self) -> int:
        return len(self._original)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(records={len(self._original)}, filters={len(self.filters)})"


class MovieList(EntityList[Movie]):
    """Entity list of movies."""


class CategoryList(EntityList[Category]):
    """Entity list of movie categories."""
