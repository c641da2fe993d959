"""Utility functions for greatcircle.

This module provides utility functions including:

- Logging setup and configuration
- Search statistics collection
"""

from greatcircle.utils.logging import (
    SearchLogger,
    SearchStats,
    configure_logging,
)

__all__ = [
    "SearchLogger",
    "SearchStats",
    "configure_logging",
]
