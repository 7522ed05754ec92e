"""Python client for the Jira REST API (agile boards, webhooks, users)."""

from jirakit.core.exceptions.domain import (
    JiraAuthenticationError,
    JiraConnectionError,
    JiraError,
    JiraHTTPError,
    JiraNotFoundError,
    JiraRateLimitError,
    JiraResponseDecodeError,
    JiraResponseReadError,
    JiraTransportError,
)
from jirakit.services.jira_client import JiraClient
from jirakit.services.resource import ApiResult

try:
    from importlib.metadata import version

    __version__ = version("jirakit")
except Exception:
    __version__ = "0.0.0"

__all__ = [
    "ApiResult",
    "JiraAuthenticationError",
    "JiraClient",
    "JiraConnectionError",
    "JiraError",
    "JiraHTTPError",
    "JiraNotFoundError",
    "JiraRateLimitError",
    "JiraResponseDecodeError",
    "JiraResponseReadError",
    "JiraTransportError",
]
