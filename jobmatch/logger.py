"""
Structured logging for JobMatch.

Console and daily file output with optional JSON context, plus
scoring-session metrics so a CLI run can report what it did.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


_DATEFMT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=_DATEFMT))
    return handler


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for a scoring session.
    """

    def __init__(
        self,
        name: str = "jobmatch",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")

        self.logger = logging.getLogger(name)
        self.logger.setLevel(numeric_level)
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.metrics = {
            "matches_scored": 0,
            "score_total": 0.0,
            "score_min": None,
            "score_max": None,
            "validation_failures": {},
            "errors_by_type": {},
        }

        if enable_console:
            self.logger.addHandler(
                _handler(logging.StreamHandler(sys.stdout), numeric_level, CONSOLE_FORMAT)
            )

        if enable_file:
            log_dir = log_dir or Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / f"jobmatch_{datetime.now().strftime('%Y%m%d')}.log"
            # file always gets everything
            self.logger.addHandler(
                _handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, FILE_FORMAT)
            )

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    def close(self):
        """Detach and close all handlers (releases log files)."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Metric tracking methods

    def record_score(self, score: float):
        """Record one computed match score."""
        m = self.metrics
        m["matches_scored"] += 1
        m["score_total"] += score
        m["score_min"] = score if m["score_min"] is None else min(m["score_min"], score)
        m["score_max"] = score if m["score_max"] is None else max(m["score_max"], score)

    def record_validation_failure(self, kind: str):
        """Record a record that failed validation (job, profile)."""
        failures = self.metrics["validation_failures"]
        failures[kind] = failures.get(kind, 0) + 1

    def record_error(self, error_type: str):
        errors = self.metrics["errors_by_type"]
        errors[error_type] = errors.get(error_type, 0) + 1

    def get_metrics(self) -> dict:
        """Return current metrics."""
        metrics_copy = dict(self.metrics)
        metrics_copy["validation_failures"] = dict(self.metrics["validation_failures"])
        metrics_copy["errors_by_type"] = dict(self.metrics["errors_by_type"])
        scored = metrics_copy["matches_scored"]
        metrics_copy["mean_score"] = (
            round(metrics_copy["score_total"] / scored, 3) if scored > 0 else None
        )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Scoring Session Metrics ===")
        self.info(f"Matches scored: {metrics['matches_scored']}")
        if metrics["mean_score"] is not None:
            self.info(
                f"Scores: mean={metrics['mean_score']:.3f} "
                f"min={metrics['score_min']:.3f} max={metrics['score_max']:.3f}"
            )

        if metrics["validation_failures"]:
            self.info("Validation failures:")
            for kind, count in metrics["validation_failures"].items():
                self.info(f"  {kind}: {count}")

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "jobmatch",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
