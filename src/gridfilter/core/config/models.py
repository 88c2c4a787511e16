"""
Configuration Models

Pydantic models for type-safe configuration of filter translation,
field validation and logging.
"""

import logging
from pydantic import BaseModel, Field, field_validator


class FilterConfig(BaseModel):
    """Configuration for descriptor translation and filter validation."""

    default_search_field: str = Field(
        default="name",
        description="Field used by search when no field name is given"
    )
    strict_kinds: bool = Field(
        default=True,
        description="Reject tagged descriptors with an unknown kind instead of "
                    "treating them as value-set descriptors"
    )
    validate_fields: bool = Field(
        default=True,
        description="Check filter fields against the records before applying them"
    )
    accept_legacy_shape: bool = Field(
        default=True,
        description="Accept the grid shape {type, fieldName, filter, filterTo}"
    )

    @field_validator('default_search_field')
    @classmethod
    def validate_search_field(cls, v: str) -> str:
        """Search field must be a non-blank name."""
        v = v.strip()
        if not v:
            raise ValueError("default_search_field cannot be empty")
        return v


class AppConfig(BaseModel):
    """Root configuration model."""

    version: str = Field(default="0.1.0", description="Configuration version")

    filters: FilterConfig = Field(default_factory=FilterConfig, description="Filter configuration")

    verbose: bool = Field(
        default=False,
        description="Enable verbose logging output"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging with per-filter narrowing counts"
    )

    @property
    def log_level(self) -> int:
        """Logging level implied by the verbose/debug flags."""
        if self.debug:
            return logging.DEBUG
        if self.verbose:
            return logging.INFO
        return logging.WARNING
