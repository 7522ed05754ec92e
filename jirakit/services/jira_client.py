import time
from base64 import b64encode

import httpx
from loguru import logger

from jirakit.core.config import Settings, get_settings
from jirakit.core.exceptions.domain import (
    JiraAuthenticationError,
    JiraConnectionError,
    JiraHTTPError,
    JiraNotFoundError,
    JiraRateLimitError,
    JiraResponseReadError,
)
from jirakit.core.logger import sanitize_dict, sanitize_url, setup_logger
from jirakit.schemas.base import JiraSchema
from jirakit.services.board import BoardService
from jirakit.services.user import UserService
from jirakit.services.webhook import WebhookService

_READ_ERRORS = (httpx.TransportError, httpx.StreamError)


class JiraClient:
    """Synchronous Jira REST API client using httpx.

    Resource operations live on the attached services::

        with JiraClient("https://jira.example.com", "me", "token") as jira:
            boards, response = jira.board.get_all_boards()
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        api_token: str | None = None,
        *,
        proxy_url: str | None = None,
        timeout: float = 30.0,
        max_attempts: int = 1,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.max_attempts = max(1, max_attempts)
        self._auth_header = self._build_auth_header(username, api_token)
        self._proxy_url = proxy_url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

        self.board = BoardService(self)
        self.user = UserService(self)
        self.webhook = WebhookService(self)

        logger.debug(
            f"JiraClient initialized: base_url={self.base_url}, username={username}, "
            f"proxy={sanitize_url(proxy_url)}"
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        configure_logging: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> "JiraClient":
        """Build a client from ``Settings`` (environment / .env by default)."""
        settings = settings or get_settings()
        if configure_logging:
            setup_logger(debug=settings.debug, log_file=settings.log_file)
        if not settings.has_credentials:
            logger.warning("No Jira credentials configured - requests will be anonymous")
        api_token = settings.api_token.get_secret_value() if settings.api_token else None
        return cls(
            settings.base_url,
            settings.username,
            api_token,
            proxy_url=settings.proxy_url,
            timeout=settings.timeout,
            max_attempts=settings.max_attempts,
            transport=transport,
        )

    @staticmethod
    def _build_auth_header(username: str | None, api_token: str | None) -> str | None:
        if not (username and api_token):
            return None
        credentials = b64encode(f"{username}:{api_token}".encode()).decode()
        return f"Basic {credentials}"

    @property
    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._auth_header:
            headers["Authorization"] = self._auth_header
        return headers

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            client_kwargs: dict = {
                "base_url": self.base_url,
                "headers": self._headers,
                "timeout": httpx.Timeout(self._timeout),
            }

            if self._proxy_url:
                client_kwargs["proxy"] = self._proxy_url
                logger.debug(f"Using proxy: {sanitize_url(self._proxy_url)}")
            if self._transport is not None:
                client_kwargs["transport"] = self._transport

            self._client = httpx.Client(**client_kwargs)
        return self._client

    def close(self) -> None:
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ─── Requests ─────────────────────────────────────────────────────

    def new_request(
        self,
        method: str,
        path: str,
        body: JiraSchema | dict | None = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL, with an optional JSON body."""
        payload = body.to_payload() if isinstance(body, JiraSchema) else body
        if isinstance(payload, dict):
            logger.debug(f"Jira {method} {path} body={sanitize_dict(payload)}")
        return self._get_client().build_request(method, path, json=payload)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` and return the (unread) response for a 2xx status.

        Non-2xx statuses and transport failures raise a ``JiraTransportError``.
        Rate limits and timeouts are retried only when ``max_attempts`` > 1.
        """
        client = self._get_client()

        for attempt in range(self.max_attempts):
            logger.debug(f"Jira request: {request.method} {request.url}")
            try:
                response = client.send(request, stream=True)
            except httpx.TimeoutException as e:
                if attempt < self.max_attempts - 1:
                    wait = 2 ** (attempt + 1)
                    logger.warning(f"Jira request timeout, retrying in {wait}s (attempt {attempt + 1})")
                    time.sleep(wait)
                    continue
                raise JiraConnectionError(
                    f"Jira request timed out after {self.max_attempts} attempt(s)"
                ) from e
            except httpx.TransportError as e:
                raise JiraConnectionError(f"Cannot connect to Jira at {self.base_url}: {e}") from e

            if response.is_success:
                return response

            if response.status_code == 429 and attempt < self.max_attempts - 1:
                retry_after = self._retry_after(response)
                if retry_after is None:
                    retry_after = 10
                wait = retry_after * (2**attempt)
                logger.warning(f"Jira rate limit hit, retrying in {wait}s (attempt {attempt + 1})")
                response.close()
                time.sleep(wait)
                continue

            self._raise_for_status(response)

        raise JiraConnectionError("Max retries exceeded")

    @staticmethod
    def read(response: httpx.Response) -> bytes:
        """Read the full response body and release the connection."""
        try:
            return response.read()
        except _READ_ERRORS as e:
            logger.error(f"Failed to read Jira response body from {response.request.url}: {e}")
            raise JiraResponseReadError(response=response) from e
        finally:
            response.close()

    # ─── Status handling ──────────────────────────────────────────────

    @staticmethod
    def _retry_after(response: httpx.Response) -> int | None:
        value = response.headers.get("Retry-After")
        if value is None or not value.isdigit():
            return None
        return int(value)

    @staticmethod
    def _body_text(response: httpx.Response) -> str:
        try:
            return response.text
        except httpx.ResponseNotRead:
            return ""

    def _error_message(self, response: httpx.Response) -> str:
        error_msg = f"Jira API error: {response.status_code}"
        if not self._body_text(response):
            return error_msg
        try:
            error_body = response.json()
        except ValueError:
            return f"{error_msg} - {response.text[:200]}"

        details: list[str] = []
        if isinstance(error_body, dict):
            details.extend(error_body.get("errorMessages") or [])
            details.extend(f"{k}: {v}" for k, v in (error_body.get("errors") or {}).items())
        if details:
            error_msg += f" - {', '.join(details)}"
        return error_msg

    def _raise_for_status(self, response: httpx.Response) -> None:
        # An unreadable error body must not mask the status.
        try:
            self.read(response)
        except JiraResponseReadError:
            logger.warning(f"Jira error body unreadable, mapping status {response.status_code} only")
        status = response.status_code

        if status == 401:
            logger.warning("Jira authentication failed - check API token")
            logger.error(f"Jira auth error response: {self._body_text(response)[:200]}")
            raise JiraAuthenticationError(response=response)

        if status == 403:
            raise JiraAuthenticationError(
                "Insufficient permissions for this Jira resource", status_code=403, response=response
            )

        if status == 404:
            logger.warning(f"Jira resource not found: {response.request.url}")
            raise JiraNotFoundError(response.request.url.path, response=response)

        if status == 429:
            raise JiraRateLimitError(retry_after=self._retry_after(response), response=response)

        error_msg = self._error_message(response)
        logger.error(error_msg)
        raise JiraHTTPError(status, error_msg, response=response)
