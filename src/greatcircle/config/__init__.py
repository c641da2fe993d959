"""Configuration management for greatcircle.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Numerical tolerances
- SearchConfig: Intersection search settings
- LoggingConfig: Logging settings
- GreatCircleSettings: Main application settings

Key constants:
- TOLERANCE_DEG: Default angular tolerance in degrees
- DEGENERACY_EPSILON: Threshold for degenerate start points
"""

from greatcircle.config.settings import (
    DEGENERACY_EPSILON,
    TOLERANCE_DEG,
    GeometryConfig,
    GreatCircleSettings,
    LoggingConfig,
    SearchConfig,
    get_default_settings,
)

__all__ = [
    "DEGENERACY_EPSILON",
    "TOLERANCE_DEG",
    "GeometryConfig",
    "GreatCircleSettings",
    "LoggingConfig",
    "SearchConfig",
    "get_default_settings",
]
