"""Pydantic models for search queries and Jira issues."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_RESULTS = 50
DEFAULT_FIELDS: tuple[str, ...] = ("summary", "status", "assignee", "priority", "created", "updated")


class SearchQuery(BaseModel):
    """A JQL string together with its paging parameters."""

    model_config = ConfigDict(frozen=True)

    jql: str = Field(default=..., min_length=1, description="Query in Jira Query Language")
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, description="Page size")
    fields: tuple[str, ...] = Field(default=DEFAULT_FIELDS, description="Issue fields to return")


class Issue(BaseModel):
    """Represents a single Jira issue as returned by the search endpoint."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "key": "PROJ-123",
                "summary": "Login page returns 500",
                "status": "In Progress",
                "priority": "Major",
                "updated": "2024-01-15T14:30:00.000+0000",
            }
        },
    )

    key: str = Field(default=..., description="Issue key")
    summary: str = Field(default="", description="Issue summary")
    status: str = Field(default="Unknown", description="Workflow status name")
    priority: str = Field(default="None", description="Priority name")
    updated: str = Field(default="", description="Last update timestamp as sent by Jira")


class SearchResult(BaseModel):
    """One page of search results."""

    total: int = Field(default=0, ge=0, description="Total number of matching issues")
    issues: list[Issue] = Field(default_factory=list, description="Issues on this page")


def browse_url(base_url: str, key: str) -> str:
    """Return the browser URL of an issue on a Jira instance."""
    return f"{base_url.rstrip('/')}/browse/{key}"
