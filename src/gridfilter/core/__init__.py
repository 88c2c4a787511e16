"""
Core GridFilter Package

Contains the error hierarchy, configuration and logging setup shared by the
filters and the entity list pipeline.
"""

from gridfilter.core.exceptions import (
    GridFilterError,
    DescriptorError,
    MalformedDescriptorError,
    UnknownDescriptorKindError,
    InvalidFieldError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    RecoverySuggestion
)
from gridfilter.core.config import AppConfig, FilterConfig, ConfigManager
from gridfilter.core.log_setup import setup_logging

__all__ = [
    "GridFilterError",
    "DescriptorError",
    "MalformedDescriptorError",
    "UnknownDescriptorKindError",
    "InvalidFieldError",
    "ConfigurationError",
    "ErrorCode",
    "ErrorContext",
    "RecoverySuggestion",
    "AppConfig",
    "FilterConfig",
    "ConfigManager",
    "setup_logging",
]
