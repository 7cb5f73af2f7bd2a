"""Error types raised by the Jira search client."""


class JiraSearchError(Exception):
    """Base class for all errors reported to the user."""


class ConfigurationError(JiraSearchError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidFilterError(JiraSearchError):
    """Raised when command-line filter values cannot form a query."""

    pass


class TransportError(JiraSearchError):
    """Raised when the request could not be completed or the response could not be read."""

    pass


class ApiError(JiraSearchError):
    """Raised when Jira answers with a non-success status code."""

    def __init__(self, status_code: int, body: str = "", message: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Request failed with status {status_code}: {body}")


class UnauthorizedError(ApiError):
    def __init__(self, body: str = "") -> None:
        super().__init__(401, body, "Authentication failed. Check your JIRA_TOKEN.")


class ForbiddenError(ApiError):
    def __init__(self, body: str = "") -> None:
        super().__init__(
            403, body, "Access forbidden. You may not have permission to access this resource."
        )


class NotFoundError(ApiError):
    def __init__(self, body: str = "") -> None:
        super().__init__(404, body, "Resource not found. Check the Jira URL.")
