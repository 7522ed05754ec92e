from datetime import datetime

from jirakit.schemas.base import JiraSchema, SelfLinkedSchema


class JiraSprint(SelfLinkedSchema):
    id: int
    name: str | None = None
    state: str | None = None  # "active", "closed", "future"
    startDate: datetime | None = None
    endDate: datetime | None = None
    completeDate: datetime | None = None
    originBoardId: int | None = None
    goal: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.completeDate is not None


class JiraSprintList(JiraSchema):
    maxResults: int = 0
    startAt: int = 0
    total: int | None = None
    isLast: bool = False
    values: list[JiraSprint] = []
