"""Configuration settings for greatcircle."""

from pathlib import Path

from pydantic import BaseModel, Field

# Tolerance in degrees, used both for classifying angles as zero (or straight)
# and for accepting intersections just past the end of a segment.
TOLERANCE_DEG = 1e-6

# Absolute threshold below which sin(delta) * cos(lat) counts as zero.
DEGENERACY_EPSILON = 1e-12


class GeometryConfig(BaseModel):
    """Configuration for the numerical tolerances of geometry operations.

    ``tolerance_deg`` bounds near-endpoint intersections. It admits crossings that
    lie up to that many degrees beyond the end of a segment, so it is a tunable
    rather than a hard geometric limit.
    """

    tolerance_deg: float = Field(
        default=TOLERANCE_DEG,
        gt=0.0,
        le=1.0,
        description="Angular tolerance in degrees for zero-angle and segment-bound checks",
    )
    degeneracy_epsilon: float = Field(
        default=DEGENERACY_EPSILON,
        gt=0.0,
        le=1e-6,
        description="Threshold for coincident, antipodal or polar start points",
    )


class SearchConfig(BaseModel):
    """Configuration for path intersection searches."""

    parallel: bool = Field(
        default=False,
        description="Split the search over worker processes by first-path segment",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GreatCircleSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GreatCircleSettings:
    """Get default application settings."""
    return GreatCircleSettings()
