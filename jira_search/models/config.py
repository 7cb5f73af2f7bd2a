"""Configuration models for the Jira search client."""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_search.models.issue import DEFAULT_FIELDS, DEFAULT_MAX_RESULTS


class JiraConfig(BaseModel):
    """Configuration for the Jira connection."""

    base_url: str = Field(default=..., description="Jira instance URL")
    username: str = Field(default="", description="Username identifying the caller")
    token: str = Field(default="", description="Personal access token sent as a bearer token")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {v!r}")
        return v.rstrip("/")


class SearchConfig(BaseModel):
    """Configuration for search requests."""

    default_assignee: str = Field(
        default="mihall3", min_length=1, description="Assignee used when no filter is given"
    )
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, le=1000, description="Page size")
    fields: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FIELDS), description="Issue fields to request"
    )
    connect_timeout: float = Field(default=10.0, gt=0, description="Connect timeout in seconds")
    read_timeout: float = Field(default=30.0, gt=0, description="Read timeout in seconds")


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        description="If True, output JSON logs. If False, use console format.",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional path to log file. If None, logs only to stderr.",
    )


class AppConfig(BaseSettings):
    """Main application configuration.

    Values may also be supplied through environment variables with the
    JIRA_SEARCH_ prefix, e.g. JIRA_SEARCH_JIRA__BASE_URL.
    """

    model_config = SettingsConfigDict(
        env_prefix="JIRA_SEARCH_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    jira: JiraConfig
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
