"""Query building and result formatting"""

from jira_search.query.jql_builder import build_jql, build_query, describe_filter
from jira_search.query.result_formatter import ResultFormatter

__all__ = ["build_jql", "build_query", "describe_filter", "ResultFormatter"]
