"""Shared utilities for configuration and logging"""

from jira_search.utils.config_loader import ConfigLoader
from jira_search.utils.logging_config import configure_logging

__all__ = ["ConfigLoader", "configure_logging"]
