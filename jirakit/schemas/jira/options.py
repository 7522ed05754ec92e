from pydantic import Field

from jirakit.schemas.base import OptionsSchema


class SearchOptions(OptionsSchema):
    """Pagination parameters shared by the list endpoints."""

    startAt: int | None = Field(default=None, ge=0)
    maxResults: int | None = Field(default=None, ge=0)


class BoardListOptions(SearchOptions):
    """Optional filters for ``BoardService.get_all_boards``.

    ``boardType`` is "scrum" or "kanban". ``name`` matches boards whose name
    contains the value. ``projectKeyOrId`` keeps boards whose filter
    references the project.
    """

    boardType: str | None = None
    name: str | None = None
    projectKeyOrId: str | None = None


class UserPermissionSearch(SearchOptions):
    """Filters for ``UserService.permission_search``.

    ``permissions`` is a comma separated list of permission keys, e.g.
    "BROWSE,EDIT_ISSUE".
    """

    username: str | None = None
    permissions: str | None = None
    issueKey: str | None = None
    projectKey: str | None = None
