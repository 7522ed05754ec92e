from jirakit.schemas.base import JiraSchema, SelfLinkedSchema


class JiraEpicColor(JiraSchema):
    key: str | None = None


class JiraEpic(SelfLinkedSchema):
    id: int
    key: str | None = None
    name: str | None = None
    summary: str | None = None
    done: bool | None = None
    color: JiraEpicColor | None = None


class JiraEpicList(JiraSchema):
    maxResults: int = 0
    startAt: int = 0
    total: int | None = None
    isLast: bool = False
    values: list[JiraEpic] = []
