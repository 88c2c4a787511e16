"""
Filter Factory for creating filter instances from descriptors.

Translates validated descriptors into concrete filters. The set of filter
kinds is closed: every FilterKind has exactly one filter class and there is
no fallback branch for anything else.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Type, Union

from gridfilter.core.config.models import FilterConfig
from gridfilter.core.exceptions import DescriptorError
from gridfilter.descriptors import (
    EqualityDescriptor, FilterDescriptor, RangeDescriptor, ValuesSetDescriptor,
    parse_descriptor
)
from gridfilter.filters.base import Filter, FilterChain, FilterKind
from gridfilter.filters.equality import EqualityFilter
from gridfilter.filters.numeric_range import RangeFilter
from gridfilter.filters.values_set import ValuesSetFilter


logger = logging.getLogger(__name__)


class FilterFactory:
    """
    Factory class for creating filters from descriptors.

    Args:
        config: Filter configuration controlling how strictly descriptors
            are parsed (defaults to FilterConfig())
    """

    FILTER_REGISTRY: Dict[FilterKind, Type[Filter]] = {
        FilterKind.EQUALITY: EqualityFilter,
        FilterKind.RANGE: RangeFilter,
        FilterKind.VALUES_SET: ValuesSetFilter,
    }

    def __init__(self, config: Optional[FilterConfig] = None):
        self.config = config or FilterConfig()
        self.logger = logging.getLogger(__name__)

    @classmethod
    def create_filter(cls, kind: Union[str, FilterKind], field_name: str, **params: Any) -> Filter:
        """
        Create a single filter instance.

        Args:
            kind: Filter kind (FilterKind or its string value)
            field_name: Field the filter tests
            **params: Constructor arguments of the filter class
                (``value``; ``low``/``high``; ``values``)

        Returns:
            Filter instance

        Raises:
            ValueError: If the kind is unknown
        """
        try:
            filter_kind = FilterKind(kind)
        except ValueError:
            available = ', '.join(k.value for k in FilterKind)
            raise ValueError(f"Unknown filter kind '{kind}'. Available kinds: {available}")

        return cls.FILTER_REGISTRY[filter_kind](field_name, **params)

    def create_from_descriptor(
        self,
        descriptor: Union[FilterDescriptor, Mapping],
        index: Optional[int] = None
    ) -> Filter:
        """
        Translate one descriptor into a filter.

        Raises:
            UnknownDescriptorKindError: If a tagged descriptor has an unknown kind
            MalformedDescriptorError: If the descriptor is incomplete or mistyped
        """
        parsed = parse_descriptor(
            descriptor,
            index=index,
            strict_kinds=self.config.strict_kinds,
            accept_legacy_shape=self.config.accept_legacy_shape
        )

        try:
            if isinstance(parsed, EqualityDescriptor):
                return self.create_filter(FilterKind.EQUALITY, parsed.field_name, value=parsed.value)
            if isinstance(parsed, RangeDescriptor):
                return self.create_filter(
                    FilterKind.RANGE, parsed.field_name, low=parsed.value, high=parsed.value_to
                )
            if isinstance(parsed, ValuesSetDescriptor):
                return self.create_filter(FilterKind.VALUES_SET, parsed.field_name, values=parsed.values)
        except DescriptorError as e:
            if index is not None and e.context.descriptor_index is None:
                e.context.descriptor_index = index
            raise

        raise TypeError(f"Unsupported descriptor type: {type(parsed).__name__}")

    def create_from_descriptors(
        self,
        descriptors: Sequence[Union[FilterDescriptor, Mapping]]
    ) -> List[Filter]:
        """
        Translate descriptors into filters, one per descriptor, in order.

        The whole batch fails on the first invalid descriptor.
        """
        filters = [self.create_from_descriptor(d, index=i) for i, d in enumerate(descriptors)]
        self.logger.debug(f"Created {len(filters)} filter(s) from descriptors")
        return filters

    def create_filter_chain(
        self,
        descriptors: Sequence[Union[FilterDescriptor, Mapping]]
    ) -> FilterChain:
        """Create a filter chain from a list of descriptors."""
        return FilterChain(self.create_from_descriptors(descriptors))

    @classmethod
    def get_available_filters(cls) -> Dict[str, str]:
        """Map each filter kind to the name of its class."""
        return {kind.value: filter_class.__name__ for kind, filter_class in cls.FILTER_REGISTRY.items()}
