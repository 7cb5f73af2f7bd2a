"""Jira client for the issue search API."""

from typing import Any, Iterable

import requests
import structlog
from pydantic import ValidationError

from jira_search.exceptions import (
    ApiError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
)
from jira_search.models.config import JiraConfig, SearchConfig
from jira_search.models.filters import ByAssignee, ByLabel, ByLabels, FilterIntent
from jira_search.models.issue import Issue, SearchQuery, SearchResult, browse_url
from jira_search.query.jql_builder import build_query

log = structlog.stdlib.get_logger()

SEARCH_PATH = "/rest/api/2/search"


class JiraClient:
    """Thin client around the Jira REST search endpoint.

    Every call issues exactly one GET request on a fresh session; nothing is
    retried and no state is kept between calls apart from the credentials.
    """

    def __init__(self, config: JiraConfig, search_config: SearchConfig | None = None):
        """
        Initialize Jira client.

        Args:
            config: Jira connection settings including credentials
            search_config: Page size, fields and timeouts. Defaults are used if None

        Raises:
            ConfigurationError: If the username or token is missing
        """
        if not config.username.strip():
            raise ConfigurationError("JIRA_USERNAME environment variable is not set")
        if not config.token.strip():
            raise ConfigurationError("JIRA_TOKEN environment variable is not set")

        self._base_url = config.base_url.rstrip("/")
        self._username = config.username
        self._token = config.token
        self._search_config = search_config or SearchConfig()
        log.info(
            "jira_client_initialized",
            base_url=self._base_url,
            username=self._username,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def search_url(self) -> str:
        return f"{self._base_url}{SEARCH_PATH}"

    @property
    def timeout(self) -> tuple[float, float]:
        """(connect, read) timeout pair in seconds."""
        return (self._search_config.connect_timeout, self._search_config.read_timeout)

    def browse_url(self, key: str) -> str:
        return browse_url(self._base_url, key)

    def search(self, query: SearchQuery) -> SearchResult:
        """
        Run a JQL search and return one page of results.

        Args:
            query: The query and its paging parameters

        Returns:
            SearchResult holding the reported total and the returned issues

        Raises:
            TransportError: On timeout, connection failure or an unreadable body
            ApiError: If Jira answers with a non-200 status
        """
        params = {
            "jql": query.jql,
            "maxResults": query.max_results,
            "fields": ",".join(query.fields),
        }
        log.info("searching_issues", jql=query.jql, max_results=query.max_results)

        try:
            with requests.Session() as session:
                response = session.get(
                    self.search_url,
                    params=params,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except requests.exceptions.Timeout as e:
            log.error("search_request_timed_out", url=self.search_url, error=str(e))
            raise TransportError(f"Request to {self.search_url} timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            log.error("search_request_failed", url=self.search_url, error=str(e))
            raise TransportError(f"Request to {self.search_url} failed: {e}") from e

        result = self._parse_response(response)
        log.info("search_completed", total=result.total, returned=len(result.issues))
        return result

    def search_intent(self, intent: FilterIntent) -> SearchResult:
        """Build a query for a filter intent with the configured page size and fields and run it."""
        query = build_query(
            intent,
            max_results=self._search_config.max_results,
            fields=self._search_config.fields,
        )
        return self.search(query)

    def find_issues_assigned_to(self, username: str) -> SearchResult:
        return self.search_intent(ByAssignee(username=username))

    def find_issues_by_label(self, label: str) -> SearchResult:
        return self.search_intent(ByLabel(label=label))

    def find_issues_by_labels(self, labels: Iterable[str], match_all: bool = False) -> SearchResult:
        return self.search_intent(ByLabels(labels=tuple(labels), match_all=match_all))

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _parse_response(self, response: requests.Response) -> SearchResult:
        """
        Map an HTTP response to a SearchResult or a classified error.

        Args:
            response: Response from the search endpoint

        Returns:
            Parsed SearchResult for a 200 response

        Raises:
            UnauthorizedError: On 401
            ForbiddenError: On 403
            NotFoundError: On 404
            ApiError: On any other non-200 status
            TransportError: If a 200 body is not valid JSON
        """
        status_code = response.status_code

        if status_code == 200:
            try:
                payload = response.json()
            except ValueError as e:
                log.error("invalid_json_response", error=str(e))
                raise TransportError(f"Failed to parse search response as JSON: {e}") from e
            return self._convert_to_search_result(payload)

        log.warning("search_request_rejected", status_code=status_code)
        if status_code == 401:
            raise UnauthorizedError(response.text)
        if status_code == 403:
            raise ForbiddenError(response.text)
        if status_code == 404:
            raise NotFoundError(response.text)
        raise ApiError(status_code, response.text)

    def _convert_to_search_result(self, payload: Any) -> SearchResult:
        """
        Convert a search response body to a SearchResult.

        Missing "issues" is treated as an empty page and missing "total" as 0.

        Raises:
            TransportError: If the body does not have the expected shape
        """
        if not isinstance(payload, dict):
            raise TransportError(
                f"Unexpected search response: expected a JSON object, got {type(payload).__name__}"
            )

        raw_issues = payload.get("issues") or []
        total = payload.get("total")

        if not isinstance(raw_issues, list):
            log.error("invalid_search_response", field="issues")
            raise TransportError(
                f"Unexpected search response: 'issues' must be a list, got {type(raw_issues).__name__}"
            )

        try:
            issues = [self._convert_to_issue(raw) for raw in raw_issues]
            return SearchResult(total=total if total is not None else 0, issues=issues)
        except ValidationError as e:
            log.error("invalid_search_response", error=str(e))
            raise TransportError(f"Unexpected search response: {e}") from e

    def _convert_to_issue(self, raw_issue: Any) -> Issue:
        """
        Convert one entry of the "issues" array to an Issue model.

        Raises:
            TransportError: If the entry has no "key" or a nested field is not an object
        """
        if not isinstance(raw_issue, dict) or "key" not in raw_issue:
            log.error("missing_required_field", field="key")
            raise TransportError("Unexpected search response: issue without a 'key'")

        key = raw_issue["key"]
        fields = self._object_field(raw_issue, "fields", key)
        status = self._object_field(fields, "status", key).get("name")
        priority = self._object_field(fields, "priority", key).get("name")

        return Issue(
            key=key,
            summary=fields.get("summary") or "",
            status=status or "Unknown",
            priority=priority or "None",
            updated=fields.get("updated") or "",
        )

    @staticmethod
    def _object_field(container: dict[str, Any], name: str, key: Any) -> dict[str, Any]:
        """Return container[name] as a dict, treating absent and null as empty."""
        value = container.get(name)
        if value is None:
            return {}
        if not isinstance(value, dict):
            log.error("invalid_issue_field", issue_key=key, field=name)
            raise TransportError(
                f"Unexpected search response: '{name}' of issue {key} must be an object, "
                f"got {type(value).__name__}"
            )
        return value
