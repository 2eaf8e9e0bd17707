"""Pytest configuration and shared fixtures.

Usage Guide:
- For executor/client tests: use `transport` (an AsyncMock) and `no_sleep`
- For log assertions: use `log_records` (list of (level, message) tuples)
- For canned API responses: import from tests.fixtures
"""

from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from loguru import logger

from set_commit_status.config import get_settings
from set_commit_status.schemas import CommitState, CommitStatusRequest
from tests.fixtures import SHA


# -----------------------------------------------------------------------------
# Logging Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def log_records() -> Generator[list[tuple[str, str]], None, None]:
    """Capture loguru records as (level, message) tuples."""
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda msg: records.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)


# -----------------------------------------------------------------------------
# Transport Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def transport() -> AsyncMock:
    """A transport whose responses are set per test via side_effect/return_value."""
    return AsyncMock()


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Sleep replacement so rate limit waits finish instantly."""
    return AsyncMock(return_value=None)


# -----------------------------------------------------------------------------
# Sample Data Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def status_request() -> CommitStatusRequest:
    """Minimal status request: owner, repo, sha and state only."""
    return CommitStatusRequest(
        owner="octo",
        repo="hello-world",
        sha=SHA,
        state=CommitState.SUCCESS,
    )


# -----------------------------------------------------------------------------
# Settings Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Keep cached Settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
