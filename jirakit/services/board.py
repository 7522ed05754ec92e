from jirakit.core.constants import AGILE_API, MAX_RESULTS_CEILING
from jirakit.schemas.jira.board import JiraBoard, JiraBoardConfiguration, JiraBoardList
from jirakit.schemas.jira.epic import JiraEpic, JiraEpicList
from jirakit.schemas.jira.issue import JiraIssue, JiraIssueList
from jirakit.schemas.jira.options import BoardListOptions
from jirakit.schemas.jira.sprint import JiraSprint, JiraSprintList
from jirakit.services.resource import ApiResult, ResourceOperation, ResourceService

_BOARDS = f"{AGILE_API}/board"
_BOARD = f"{_BOARDS}/{{board_id}}"
_CEILING = f"maxResults={MAX_RESULTS_CEILING}"


class BoardService(ResourceService):
    """Agile boards and what lives under them (sprints, epics, backlog).

    The "fetch everything under a board" calls pin ``maxResults`` to
    ``MAX_RESULTS_CEILING`` instead of paging; anything past that bound is
    not returned.
    """

    _get_all_boards: ResourceOperation[JiraBoardList] = ResourceOperation("GET", _BOARDS, JiraBoardList)
    _get_board: ResourceOperation[JiraBoard] = ResourceOperation("GET", _BOARD, JiraBoard)
    _create_board: ResourceOperation[JiraBoard] = ResourceOperation("POST", _BOARDS, JiraBoard)
    _get_board_config: ResourceOperation[JiraBoardConfiguration] = ResourceOperation(
        "GET", f"{_BOARD}/configuration", JiraBoardConfiguration
    )
    _delete_board: ResourceOperation[None] = ResourceOperation("DELETE", _BOARD)
    _get_all_sprints: ResourceOperation[list[JiraSprint]] = ResourceOperation(
        "GET", f"{_BOARD}/sprint?{_CEILING}", JiraSprintList, unwrap="values"
    )
    _get_epics: ResourceOperation[list[JiraEpic]] = ResourceOperation(
        "GET", f"{_BOARD}/epic?{_CEILING}", JiraEpicList, unwrap="values"
    )
    _get_backlog: ResourceOperation[list[JiraIssue]] = ResourceOperation(
        "GET", f"{_BOARD}/backlog?{_CEILING}", JiraIssueList, unwrap="issues"
    )
    _get_epic_issues: ResourceOperation[list[JiraIssue]] = ResourceOperation(
        "GET", f"{_BOARD}/epic/{{epic_id}}/issue?{_CEILING}", JiraIssueList, unwrap="issues"
    )
    _get_issues_without_epic: ResourceOperation[list[JiraIssue]] = ResourceOperation(
        "GET", f"{_BOARD}/epic/none/issue?{_CEILING}", JiraIssueList, unwrap="issues"
    )

    def get_all_boards(self, options: BoardListOptions | None = None) -> ApiResult[JiraBoardList]:
        """Boards the user has permission to view, filtered by ``options``."""
        return self._execute(self._get_all_boards, options=options)

    def get_board(self, board_id: int | str) -> ApiResult[JiraBoard]:
        return self._execute(self._get_board, board_id=board_id)

    def create_board(self, board: JiraBoard) -> ApiResult[JiraBoard]:
        """Create a board. ``name``, ``type`` and ``filterId`` are required by Jira.

        Without the 'Create shared objects' permission Jira creates a private
        board instead of a shared one.
        """
        return self._execute(self._create_board, body=board)

    def get_board_config(self, board_id: int | str) -> ApiResult[JiraBoardConfiguration]:
        return self._execute(self._get_board_config, board_id=board_id)

    def delete_board(self, board_id: int | str) -> ApiResult[None]:
        return self._execute(self._delete_board, board_id=board_id)

    def get_all_sprints(self, board_id: int | str) -> ApiResult[list[JiraSprint]]:
        return self._execute(self._get_all_sprints, board_id=board_id)

    def get_epics_for_board(self, board_id: int | str) -> ApiResult[list[JiraEpic]]:
        return self._execute(self._get_epics, board_id=board_id)

    def get_issues_for_backlog(self, board_id: int | str) -> ApiResult[list[JiraIssue]]:
        return self._execute(self._get_backlog, board_id=board_id)

    def get_issues_for_epic(self, board_id: int | str, epic_id: int | str) -> ApiResult[list[JiraIssue]]:
        return self._execute(self._get_epic_issues, board_id=board_id, epic_id=epic_id)

    def get_issues_without_epic(self, board_id: int | str) -> ApiResult[list[JiraIssue]]:
        return self._execute(self._get_issues_without_epic, board_id=board_id)
