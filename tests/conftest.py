"""Shared pytest fixtures for the tagdent test suite."""

from __future__ import annotations

import io
from typing import Iterator

import pytest
from loguru import logger

from tagdent.telemetry.logger import configure_logging


@pytest.fixture
def log_sink() -> Iterator[io.StringIO]:
    """Capture tagdent log lines emitted during one test."""

    sink = io.StringIO()
    handler_id = configure_logging(sink)
    try:
        yield sink
    finally:
        logger.remove(handler_id)
