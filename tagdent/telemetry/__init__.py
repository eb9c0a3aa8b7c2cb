"""Logging helpers for suppressed transform failures."""

from .logger import configure_logging, emit, log_transform_failure

__all__ = ["configure_logging", "emit", "log_transform_failure"]
