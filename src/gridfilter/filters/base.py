"""
Abstract Filter Base Classes

Defines the core interface for record filters and the chain that folds an
ordered sequence of filters over a record list. Every filter narrows a list
to the records matching its predicate, keeping their original order.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from gridfilter.core.exceptions import ErrorCode, malformed_descriptor_error


class FilterKind(Enum):
    """The closed set of filter variants."""
    EQUALITY = "equality"
    RANGE = "range"
    VALUES_SET = "values_set"


class Filter(ABC):
    """
    Abstract base class for all record filters.

    A filter targets a single field and decides per record whether it
    matches. Filters hold no state besides their parameters, so the same
    instance can be applied to any number of lists.
    """

    kind: FilterKind

    def __init__(self, field_name: str):
        """
        Initialize the filter.

        Args:
            field_name: Name of the record field the filter tests
        """
        if not isinstance(field_name, str) or not field_name:
            raise malformed_descriptor_error(
                f"Field name must be a non-empty string, got {field_name!r}",
                error_code=ErrorCode.DESCRIPTOR_TYPE_MISMATCH
            )
        self.field_name = field_name
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Short machine-friendly name of the filter."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the filter does."""
        pass

    @abstractmethod
    def matches(self, record: Any) -> bool:
        """
        Test a single record.

        Records lacking the field, or holding a value the filter cannot
        compare, never match. This method does not raise for such records.
        """
        pass

    @abstractmethod
    def to_descriptor(self) -> Dict[str, Any]:
        """Return the external descriptor that builds an equivalent filter."""
        pass

    def apply(self, records: Sequence[Any]) -> List[Any]:
        """
        Apply the filter to a list of records.

        Args:
            records: Records to filter; left untouched

        Returns:
            New list with the matching records in their original order
        """
        result = [record for record in records if self.matches(record)]
        self.logger.debug(f"{self.description}: {len(records)} -> {len(result)}")
        return result

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_descriptor()})"


class FilterChain:
    """
    Ordered sequence of filters applied as a fold.

    Each filter receives the output of the previous one, so the result is
    the conjunction of all filters. An empty chain returns its input
    unchanged.
    """

    def __init__(self, filters: Optional[Iterable[Filter]] = None):
        self.filters: List[Filter] = list(filters or [])
        self.logger = logging.getLogger(__name__)

    def append(self, filter_instance: Filter) -> None:
        """Add a filter at the end of the chain."""
        self.filters.append(filter_instance)

    def extend(self, filters: Iterable[Filter]) -> None:
        """Add several filters at the end of the chain, keeping their order."""
        self.filters.extend(filters)

    def clear(self) -> None:
        """Remove every filter from the chain."""
        self.filters = []

    def apply(self, records: Sequence[Any]) -> List[Any]:
        """
        Fold every filter over the records in insertion order.

        Args:
            records: Records to filter; left untouched

        Returns:
            New list with the records that passed all filters
        """
        result = list(records)
        for filter_instance in self.filters:
            result = filter_instance.apply(result)

        self.logger.debug(
            f"Filter chain of {len(self.filters)} filter(s): {len(records)} -> {len(result)}"
        )
        return result

    def to_descriptors(self) -> List[Dict[str, Any]]:
        """Descriptors for every filter in the chain."""
        return [f.to_descriptor() for f in self.filters]

    def __len__(self) -> int:
        return len(self.filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self.filters)

    def __str__(self) -> str:
        if not self.filters:
            return "FilterChain(<empty>)"
        return f"FilterChain({' AND '.join(f.description for f in self.filters)})"
