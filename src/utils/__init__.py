"""Utility functions for the task tracker."""

from src.utils.logging import (
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]
