"""Public enum exports used across the package."""

from multi_target_logging.enums.logging import LogLevel

__all__ = [
    "LogLevel",
]
