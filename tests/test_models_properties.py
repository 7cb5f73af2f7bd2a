"""Property-based tests for the issue and filter models.

Feature: jira-search
"""

import pytest
from hypothesis import given, strategies as st
from pydantic import TypeAdapter, ValidationError

from jira_search.client.jira_client import JiraClient
from jira_search.models import (
    ByAssignee,
    ByLabel,
    ByLabels,
    FilterIntent,
    Issue,
    JiraConfig,
    SearchResult,
    browse_url,
)
from jira_search.query.result_formatter import ResultFormatter

filter_adapter = TypeAdapter(FilterIntent)


def test_issue_defaults():
    issue = Issue(key="X-1")

    assert issue.status == "Unknown"
    assert issue.priority == "None"
    assert issue.summary == ""


def test_issue_is_immutable():
    issue = Issue(key="X-1", summary="s1")
    with pytest.raises(ValidationError):
        issue.key = "X-2"


@given(st.integers(max_value=-1))
def test_property_negative_total_rejected(total: int):
    with pytest.raises(ValidationError):
        SearchResult(total=total)


def test_search_result_defaults_to_empty_page():
    assert SearchResult() == SearchResult(total=0, issues=[])


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"kind": "assignee", "username": "jdoe"}, ByAssignee(username="jdoe")),
        ({"kind": "label", "label": "backend"}, ByLabel(label="backend")),
        (
            {"kind": "labels", "labels": ["a", "b"], "match_all": True},
            ByLabels(labels=("a", "b"), match_all=True),
        ),
    ],
)
def test_filter_intent_is_tagged_by_kind(payload, expected):
    assert filter_adapter.validate_python(payload) == expected


def test_filter_intent_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        filter_adapter.validate_python({"kind": "project", "key": "X"})


def test_blank_label_rejected():
    with pytest.raises(ValidationError):
        ByLabel(label="")


@given(st.from_regex(r"[A-Z]{2,6}-[1-9][0-9]{0,4}", fullmatch=True), st.booleans())
def test_property_browse_url_is_shared_by_client_and_formatter(key: str, trailing_slash: bool):
    """The client and the formatter build the same browse URL for any issue key."""
    base_url = "https://jira.example.com/jira" + ("/" if trailing_slash else "")
    client = JiraClient(JiraConfig(base_url=base_url, username="jdoe", token="t"))
    output = ResultFormatter(base_url).format_results(
        SearchResult(total=1, issues=[Issue(key=key)])
    )

    expected = f"https://jira.example.com/jira/browse/{key}"
    assert browse_url(base_url, key) == expected
    assert client.browse_url(key) == expected
    assert f"   URL: {expected}" in output
