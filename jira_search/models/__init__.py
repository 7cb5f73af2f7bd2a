"""Data models for the Jira search client."""

from jira_search.models.config import AppConfig, JiraConfig, LoggingConfig, SearchConfig
from jira_search.models.filters import ByAssignee, ByLabel, ByLabels, FilterIntent
from jira_search.models.issue import (
    DEFAULT_FIELDS,
    DEFAULT_MAX_RESULTS,
    Issue,
    SearchQuery,
    SearchResult,
    browse_url,
)

__all__ = [
    "AppConfig",
    "JiraConfig",
    "LoggingConfig",
    "SearchConfig",
    "ByAssignee",
    "ByLabel",
    "ByLabels",
    "FilterIntent",
    "DEFAULT_FIELDS",
    "DEFAULT_MAX_RESULTS",
    "Issue",
    "SearchQuery",
    "SearchResult",
    "browse_url",
]
