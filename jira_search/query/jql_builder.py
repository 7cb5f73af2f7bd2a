"""Translate filter intents into JQL search queries."""

from typing import Iterable

from jira_search.models.filters import ByAssignee, ByLabel, ByLabels, FilterIntent
from jira_search.models.issue import DEFAULT_FIELDS, DEFAULT_MAX_RESULTS, SearchQuery

ORDER_BY_UPDATED = "ORDER BY updated DESC"


def _label_clause(label: str) -> str:
    # Embedded double quotes are not escaped; callers must not pass them.
    return f'labels = "{label}"'


def build_jql(intent: FilterIntent) -> str:
    """Build the JQL text for a filter intent.

    Args:
        intent: The filter to translate

    Returns:
        JQL string ordered by most recently updated first

    Raises:
        TypeError: If intent is not a known filter type
    """
    if isinstance(intent, ByAssignee):
        return f"assignee = {intent.username} {ORDER_BY_UPDATED}"

    if isinstance(intent, ByLabel):
        return f"{_label_clause(intent.label)} {ORDER_BY_UPDATED}"

    if isinstance(intent, ByLabels):
        operator = " AND " if intent.match_all else " OR "
        conditions = operator.join(_label_clause(label) for label in intent.labels)
        return f"({conditions}) {ORDER_BY_UPDATED}"

    raise TypeError(f"Unsupported filter intent: {type(intent).__name__}")


def build_query(
    intent: FilterIntent,
    max_results: int = DEFAULT_MAX_RESULTS,
    fields: Iterable[str] | None = None,
) -> SearchQuery:
    """Build a complete search query for a filter intent.

    Args:
        intent: The filter to translate
        max_results: Maximum number of issues to return
        fields: Issue fields to request. If None, uses the default field set

    Returns:
        Immutable SearchQuery
    """
    return SearchQuery(
        jql=build_jql(intent),
        max_results=max_results,
        fields=tuple(fields) if fields is not None else DEFAULT_FIELDS,
    )


def describe_filter(intent: FilterIntent) -> str:
    """Short human-readable description of a filter, used in result headers."""
    if isinstance(intent, ByLabel):
        return f"label={intent.label}"
    if isinstance(intent, ByLabels):
        mode = "all" if intent.match_all else "any"
        return f"labels({mode})={','.join(intent.labels)}"
    if isinstance(intent, ByAssignee):
        return f"assignee={intent.username}"
    raise TypeError(f"Unsupported filter intent: {type(intent).__name__}")
