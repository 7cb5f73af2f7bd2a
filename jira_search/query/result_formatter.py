"""Result formatting functionality for displaying search results."""

import structlog

from jira_search.models.issue import Issue, SearchResult, browse_url

log = structlog.stdlib.get_logger()

RULE = "=" * 80


class ResultFormatter:
    """Formats search results as plain text for the console.

    Each issue is listed with its key, summary, status, priority, update
    timestamp and a browse URL built from the configured Jira base URL.
    """

    def __init__(self, base_url: str) -> None:
        """Initialize the result formatter.

        Args:
            base_url: Base URL for the Jira instance (used to build browse URLs)
        """
        self.base_url = base_url.rstrip("/")
        log.debug("result_formatter_initialized", base_url=self.base_url)

    def format_results(self, result: SearchResult, title: str | None = None) -> str:
        """Format a search result as a readable string.

        Args:
            result: Search result to format
            title: Optional description of the filter used, shown in the header

        Returns:
            Formatted string containing the header and all issues
        """
        if title is None:
            heading = f"Found {result.total} issue(s)"
        else:
            heading = f"Found {result.total} issue(s) for: {title}"

        formatted_lines = [RULE, heading, RULE, ""]

        if not result.issues:
            formatted_lines.append("No issues found.")
            return "\n".join(formatted_lines)

        for i, issue in enumerate(result.issues, 1):
            formatted_lines.extend(self.format_issue(issue, i))
            formatted_lines.append("")

        log.debug("results_formatted", total=result.total, issue_count=len(result.issues))
        return "\n".join(formatted_lines)

    def format_issue(self, issue: Issue, index: int) -> list[str]:
        """Format a single issue as a block of lines.

        Args:
            issue: Issue to format
            index: One-based position of the issue in the listing

        Returns:
            Lines describing the issue
        """
        return [
            f"{index}. [{issue.key}] {issue.summary}",
            f"   Status: {issue.status} | Priority: {issue.priority}",
            f"   Updated: {issue.updated}",
            f"   URL: {browse_url(self.base_url, issue.key)}",
        ]
