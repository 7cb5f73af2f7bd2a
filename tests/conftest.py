"""Shared pytest configuration."""

import pytest

from jira_search.utils.logging_config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def stderr_logging():
    """Keep log output off stdout so rendered results can be asserted on."""
    configure_logging(log_level="WARNING", json_logs=False)
    yield
