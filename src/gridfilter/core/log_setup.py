"""Logging setup for applications embedding GridFilter."""

import logging
from typing import Optional

from gridfilter.core.config.models import AppConfig


def setup_logging(config: Optional[AppConfig] = None) -> None:
    """Set up logging configuration from the verbose/debug flags."""
    config = config or AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
