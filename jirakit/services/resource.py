"""Generic typed resource operation shared by every Jira service.

Each endpoint is declared once as a ``ResourceOperation``: HTTP method, path
template and the shape the response body decodes into. Executing it builds
the path, appends the query string, sends one request through the shared
``JiraClient`` and decodes the body.
"""

from typing import TYPE_CHECKING, Any, Generic, NamedTuple, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from jirakit.core.exceptions.domain import JiraResponseDecodeError
from jirakit.schemas.base import JiraSchema
from jirakit.utils.query import add_options

if TYPE_CHECKING:
    from jirakit.services.jira_client import JiraClient

T = TypeVar("T")


class ApiResult(NamedTuple, Generic[T]):
    """Decoded value together with the raw response it came from."""

    value: T
    response: httpx.Response


class ResourceOperation(Generic[T]):
    """One Jira endpoint and the shape its response decodes into.

    ``shape`` is any type pydantic can validate (a model, ``list[Model]``...),
    or ``None`` when the body is ignored. With ``unwrap`` the named field of
    the decoded wrapper is returned instead of the wrapper itself.
    """

    def __init__(
        self,
        method: str,
        path: str,
        shape: Any = None,
        *,
        unwrap: str | None = None,
    ):
        self.method = method
        self.path = path
        self.shape = shape
        self.unwrap = unwrap
        self._adapter: TypeAdapter | None = TypeAdapter(shape) if shape is not None else None

    def __repr__(self) -> str:
        return f"ResourceOperation({self.method} {self.path})"

    def build_path(self, **path_params: object) -> str:
        quoted = {name: quote(str(value), safe="") for name, value in path_params.items()}
        return self.path.format(**quoted)

    def execute(
        self,
        client: "JiraClient",
        *,
        options: BaseModel | None = None,
        body: JiraSchema | None = None,
        **path_params: object,
    ) -> ApiResult[T]:
        path = add_options(self.build_path(**path_params), options)
        request = client.new_request(self.method, path, body)
        response = client.send(request)
        content = client.read(response)

        return ApiResult(self.decode(content, response), response)

    def decode(self, content: bytes, response: httpx.Response) -> T:
        """Validate ``content`` against the shape, unwrapping when configured.

        Operations without a shape ignore the body and decode to ``None``.
        """
        if self._adapter is None:
            return None  # type: ignore[return-value]
        try:
            value = self._adapter.validate_json(content)
        except ValidationError as e:
            logger.error(f"Could not decode response of {self}: {e.error_count()} error(s)")
            raise JiraResponseDecodeError(
                f"Could not decode the returned data for {self.method} {response.request.url.path}: {e}",
                response=response,
            ) from e

        if self.unwrap:
            return getattr(value, self.unwrap)
        return value


class ResourceService:
    """Base for the per-resource services attached to ``JiraClient``."""

    def __init__(self, client: "JiraClient"):
        self._client = client

    def _execute(self, operation: ResourceOperation[T], **kwargs: Any) -> ApiResult[T]:
        return operation.execute(self._client, **kwargs)
