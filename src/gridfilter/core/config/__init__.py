"""
Configuration Management Package

Provides Pydantic-based configuration models and management for GridFilter.
"""

from gridfilter.core.config.models import AppConfig, FilterConfig
from gridfilter.core.config.manager import ConfigManager

__all__ = [
    "AppConfig",
    "FilterConfig",
    "ConfigManager",
]
