from jirakit.core.constants import MAX_RESULTS_CEILING, PLATFORM_API
from jirakit.schemas.jira.options import UserPermissionSearch
from jirakit.schemas.jira.user import JiraUser
from jirakit.services.resource import ApiResult, ResourceOperation, ResourceService


class UserService(ResourceService):
    _get: ResourceOperation[JiraUser] = ResourceOperation("GET", f"{PLATFORM_API}/user?username={{username}}", JiraUser)
    _myself: ResourceOperation[JiraUser] = ResourceOperation("GET", f"{PLATFORM_API}/myself", JiraUser)
    _create: ResourceOperation[JiraUser] = ResourceOperation("POST", f"{PLATFORM_API}/user", JiraUser)
    _permission_search: ResourceOperation[list[JiraUser]] = ResourceOperation(
        "GET", f"{PLATFORM_API}/user/permission/search", list[JiraUser]
    )

    def get(self, username: str) -> ApiResult[JiraUser]:
        return self._execute(self._get, username=username)

    def myself(self) -> ApiResult[JiraUser]:
        """The user the client is authenticated as."""
        return self._execute(self._myself)

    def create(self, user: JiraUser) -> ApiResult[JiraUser]:
        return self._execute(self._create, body=user)

    def permission_search(self, search: UserPermissionSearch | None = None) -> ApiResult[list[JiraUser]]:
        """Users holding all of ``search.permissions``.

        ``maxResults`` falls back to ``MAX_RESULTS_CEILING`` when unset.
        """
        search = search or UserPermissionSearch()
        if search.maxResults is None:
            search = search.model_copy(update={"maxResults": MAX_RESULTS_CEILING})
        return self._execute(self._permission_search, options=search)
