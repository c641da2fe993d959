"""Logging utilities for greatcircle."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers added by configure_logging, replaced on every call
_installed_handlers: list[logging.Handler] = []


@dataclass
class SearchStats:
    """Statistics from an intersection search."""

    pairs_tested: int = 0
    intersections_found: int = 0
    coincident_pairs: int = 0
    rejected_pairs: int = 0
    section_counts: list[int] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate search duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    def merge(self, other: "SearchStats") -> None:
        """Add the counters of another search (e.g. one worker's section) to this one."""
        self.pairs_tested += other.pairs_tested
        self.intersections_found += other.intersections_found
        self.coincident_pairs += other.coincident_pairs
        self.rejected_pairs += other.rejected_pairs
        self.section_counts.extend(other.section_counts)

    def to_dict(self) -> dict[str, int | list[int]]:
        """Serialize counters for IPC."""
        return {
            "pairs_tested": self.pairs_tested,
            "intersections_found": self.intersections_found,
            "coincident_pairs": self.coincident_pairs,
            "rejected_pairs": self.rejected_pairs,
            "section_counts": list(self.section_counts),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchStats":
        return cls(
            pairs_tested=data["pairs_tested"],
            intersections_found=data["intersections_found"],
            coincident_pairs=data["coincident_pairs"],
            rejected_pairs=data["rejected_pairs"],
            section_counts=list(data["section_counts"]),
        )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by an earlier call are removed first, so repeated calls
    in one process do not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("greatcircle")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


class SearchLogger:
    """Logger for intersection searches and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger

    def log_search_start(self, operation: str, segments1: int, segments2: int) -> None:
        """Log start of a search."""
        self._logger.debug(
            "Search started",
            operation=operation,
            segments1=segments1,
            segments2=segments2,
        )

    def log_search_complete(self, operation: str, stats: SearchStats) -> None:
        """Log a finished search with its counters."""
        self._logger.info(
            "Search complete",
            operation=operation,
            pairs=stats.pairs_tested,
            found=stats.intersections_found,
            coincident=stats.coincident_pairs,
            rejected=stats.rejected_pairs,
            duration_ms=round(stats.duration_seconds * 1000.0, 2),
        )

    def log_operation(self, operation: str, **values: object) -> None:
        """Log a single-shot computation and its result."""
        self._logger.debug("Computed", operation=operation, **values)

    def log_error(self, operation: str, error: Exception) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
