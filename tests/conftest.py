# tests/conftest.py
"""Shared pytest fixtures for all test modules.

Provides common fixtures for:
- Mock environment variables
- Root logger state restoration
"""

import logging
import os
from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture
def mock_env_vars() -> Generator[dict[str, str], None, None]:
    """Provide mock environment variables for testing.

    Yields:
        Dictionary of mock environment variables that were set.
    """
    mock_vars = {
        "TASKLINE_LOG_LEVEL": "debug",
        "TASKLINE_LOG_JSON": "true",
        "TASKLINE_DATETIME_FORMATS": '["%Y-%m-%d", "%d.%m.%Y"]',
    }

    with patch.dict(os.environ, mock_vars):
        yield mock_vars


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after the test.

    configure_logging() mutates the root logger, so tests that call it
    must not leak handlers into later tests.
    """
    handlers = list(logging.root.handlers)
    level = logging.root.level

    yield

    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
