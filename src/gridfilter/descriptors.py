"""
Filter Descriptors

Descriptors are the loosely-structured filter requests a UI hands over,
typically straight from component state. Three shapes are accepted:

- ``{"kind": "equality", "fieldName": ..., "value": ...}``
- ``{"kind": "range", "fieldName": ..., "value": low, "valueTo": high}``
- ``{"fieldName": ..., "values": [...]}`` (no kind: value set)

Tagged descriptors are validated through a pydantic discriminated union on
``kind``. A tagged descriptor whose kind is not recognised is rejected
rather than reinterpreted as a value set, unless the caller opts into the
permissive behaviour with ``strict_kinds=False``.

The older grid shape ``{"type": "equalityFilter"|"rangeFilter",
"fieldName": ..., "filter": ..., "filterTo": ...}`` is normalised into the
tagged shape when ``accept_legacy_shape`` is enabled.
"""

import logging
from collections.abc import Mapping
from typing import Annotated, Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt,
    StrictStr, TypeAdapter, ValidationError, model_validator
)
from pydantic_core import PydanticCustomError

from gridfilter.core.exceptions import (
    ErrorCode, MalformedDescriptorError, malformed_descriptor_error, unknown_kind_error
)


logger = logging.getLogger(__name__)

Scalar = Union[StrictInt, StrictFloat, StrictStr]
Number = Union[StrictInt, StrictFloat]

LEGACY_KINDS = {
    "equalityFilter": "equality",
    "rangeFilter": "range",
}


class BaseDescriptor(BaseModel):
    """Fields shared by every descriptor shape."""

    model_config = ConfigDict(frozen=True)

    field_name: StrictStr = Field(
        min_length=1,
        validation_alias=AliasChoices("fieldName", "field_name"),
        serialization_alias="fieldName",
        description="Record field the filter tests"
    )

    def to_dict(self) -> Dict[str, Any]:
        """External (camelCase) representation of the descriptor."""
        return self.model_dump(by_alias=True)


class EqualityDescriptor(BaseDescriptor):
    """Request for an equality filter."""

    kind: Literal["equality"] = "equality"
    value: Scalar = Field(description="Value the field must equal")


class RangeDescriptor(BaseDescriptor):
    """Request for an inclusive numeric range filter."""

    kind: Literal["range"] = "range"
    value: Optional[Number] = Field(default=None, description="Inclusive lower bound")
    value_to: Optional[Number] = Field(
        default=None,
        validation_alias=AliasChoices("valueTo", "value_to"),
        serialization_alias="valueTo",
        description="Inclusive upper bound"
    )

    @model_validator(mode='after')
    def require_both_bounds(self):
        """A range needs both bounds."""
        missing = [name for name, bound in (("value", self.value), ("valueTo", self.value_to))
                   if bound is None]
        if missing:
            raise PydanticCustomError(
                'missing_bound',
                'range descriptor is missing {bounds}',
                {'bounds': ', '.join(missing)}
            )
        return self


class ValuesSetDescriptor(BaseDescriptor):
    """Request for a set membership filter. Carries no kind tag."""

    values: List[Scalar] = Field(description="Acceptable values for the field")

    @property
    def kind(self) -> str:
        return "values_set"


TaggedDescriptor = Annotated[
    Union[EqualityDescriptor, RangeDescriptor],
    Field(discriminator="kind")
]

FilterDescriptor = Union[EqualityDescriptor, RangeDescriptor, ValuesSetDescriptor]

_tagged_adapter = TypeAdapter(TaggedDescriptor)
_TAGGED_KINDS = ("equality", "range")


def _normalize_legacy(data: Dict[str, Any], index: Optional[int] = None) -> Dict[str, Any]:
    """Rewrite the older grid shape into the tagged shape."""
    if "type" not in data or "kind" in data:
        return data

    normalized = dict(data)
    legacy_type = normalized.pop("type")
    normalized["kind"] = LEGACY_KINDS.get(legacy_type, legacy_type)
    for legacy_key, key in (("filter", "value"), ("filterTo", "valueTo")):
        if legacy_key not in normalized:
            continue
        if key in normalized:
            raise malformed_descriptor_error(
                f"Descriptor carries both '{legacy_key}' and '{key}'",
                index=index,
                descriptor=data
            )
        normalized[key] = normalized.pop(legacy_key)
    return normalized


def _descriptor_error(
    error: ValidationError,
    raw: Any,
    index: Optional[int]
) -> MalformedDescriptorError:
    """Turn a pydantic validation error into a MalformedDescriptorError."""
    details = error.errors()
    types = {detail['type'] for detail in details}

    if 'missing_bound' in types:
        code = ErrorCode.DESCRIPTOR_MISSING_BOUND
    elif types <= {'missing'}:
        code = ErrorCode.DESCRIPTOR_MALFORMED
    else:
        code = ErrorCode.DESCRIPTOR_TYPE_MISMATCH

    problems = "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'descriptor'}: {detail['msg']}"
        for detail in details
    )
    position = f" #{index}" if index is not None else ""
    return malformed_descriptor_error(
        f"Invalid filter descriptor{position}: {problems}",
        index=index,
        error_code=code,
        descriptor=raw,
        cause=error
    )


def parse_descriptor(
    raw: Union[FilterDescriptor, Mapping],
    index: Optional[int] = None,
    strict_kinds: bool = True,
    accept_legacy_shape: bool = True
) -> FilterDescriptor:
    """
    Validate a single descriptor.

    Args:
        raw: Descriptor model or mapping in one of the accepted shapes
        index: Position of the descriptor in its batch, for error context
        strict_kinds: Reject unknown kind tags instead of falling back to a
            value set
        accept_legacy_shape: Accept the older ``type``/``filter``/``filterTo`` keys

    Returns:
        EqualityDescriptor, RangeDescriptor or ValuesSetDescriptor

    Raises:
        UnknownDescriptorKindError: If a tagged descriptor has an unknown kind
        MalformedDescriptorError: If required data is missing or mistyped
    """
    if isinstance(raw, BaseDescriptor):
        return raw

    if not isinstance(raw, Mapping):
        raise malformed_descriptor_error(
            f"Filter descriptor must be a mapping, got {type(raw).__name__}",
            index=index,
            error_code=ErrorCode.DESCRIPTOR_INVALID_SHAPE,
            descriptor=raw
        )

    data = dict(raw)
    if accept_legacy_shape:
        data = _normalize_legacy(data, index)

    kind = data.get("kind")
    try:
        if kind is None:
            data.pop("kind", None)
            return ValuesSetDescriptor.model_validate(data)

        if kind in _TAGGED_KINDS:
            return _tagged_adapter.validate_python(data)

        if strict_kinds:
            raise unknown_kind_error(kind, index=index, descriptor=dict(raw))

        position = f" #{index}" if index is not None else ""
        logger.warning(f"Descriptor{position} has unknown kind {kind!r}; treating it as a value set")
        data.pop("kind")
        return ValuesSetDescriptor.model_validate(data)
    except ValidationError as e:
        raise _descriptor_error(e, dict(raw), index) from e


def parse_descriptors(
    raw_descriptors: Sequence[Union[FilterDescriptor, Mapping]],
    strict_kinds: bool = True,
    accept_legacy_shape: bool = True
) -> List[FilterDescriptor]:
    """
    Validate a batch of descriptors, preserving their order.

    The whole batch is rejected on the first invalid descriptor.
    """
    return [
        parse_descriptor(
            raw,
            index=i,
            strict_kinds=strict_kinds,
            accept_legacy_shape=accept_legacy_shape
        )
        for i, raw in enumerate(raw_descriptors)
    ]
