import httpx

from jirakit.core.exceptions.base import AppException


class JiraError(AppException):
    """Base for every error raised while talking to Jira.

    ``response`` holds whatever response handle exists when the error is
    raised, or ``None`` when the request never produced one.
    """

    def __init__(self, message: str = "Jira request failed", response: httpx.Response | None = None):
        self.response = response
        super().__init__(message)


class JiraTransportError(JiraError):
    """Raised when the HTTP exchange itself fails (connection, timeout, non-2xx)."""

    def __init__(self, message: str = "Jira transport error", response: httpx.Response | None = None):
        super().__init__(message, response)


class JiraConnectionError(JiraTransportError):
    """Raised when connection to Jira API fails."""

    def __init__(self, message: str = "Failed to connect to Jira", response: httpx.Response | None = None):
        super().__init__(message, response)


class JiraHTTPError(JiraTransportError):
    """Raised when Jira answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None, response: httpx.Response | None = None):
        self.status_code = status_code
        super().__init__(message or f"Jira API error: {status_code}", response)


class JiraAuthenticationError(JiraHTTPError):
    """Raised when Jira API authentication fails (invalid token, etc.)."""

    def __init__(
        self,
        message: str = "Jira authentication failed - check your API token",
        status_code: int = 401,
        response: httpx.Response | None = None,
    ):
        super().__init__(status_code, message, response)


class JiraNotFoundError(JiraHTTPError):
    """Raised when a requested Jira resource does not exist."""

    def __init__(self, resource: str = "Resource", response: httpx.Response | None = None):
        super().__init__(404, f"Jira resource not found: {resource}", response)


class JiraRateLimitError(JiraHTTPError):
    """Raised when Jira API rate limit is exceeded."""

    def __init__(self, retry_after: int | None = None, response: httpx.Response | None = None):
        message = "Jira API rate limit exceeded"
        if retry_after is not None:
            message += f" - retry after {retry_after} seconds"
        self.retry_after = retry_after
        super().__init__(429, message, response)


class JiraResponseReadError(JiraError):
    """Raised when the response body cannot be read."""

    def __init__(self, message: str = "Could not read the returned data", response: httpx.Response | None = None):
        super().__init__(message, response)


class JiraResponseDecodeError(JiraError):
    """Raised when the response body is not the JSON shape we expected."""

    def __init__(
        self,
        message: str = "Could not decode the returned data",
        response: httpx.Response | None = None,
    ):
        super().__init__(message, response)
