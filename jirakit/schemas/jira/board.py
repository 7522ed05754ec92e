from jirakit.schemas.base import JiraSchema, SelfLinkedSchema


class JiraEstimationField(JiraSchema):
    fieldId: str
    displayName: str | None = None


class JiraEstimation(JiraSchema):
    type: str | None = None  # "field", "issueCount" or "none"
    field: JiraEstimationField | None = None


class JiraBoardLocation(JiraSchema):
    projectId: int | None = None
    projectKey: str | None = None
    projectName: str | None = None


class JiraBoard(SelfLinkedSchema):
    id: int | None = None
    name: str | None = None
    type: str | None = None  # "scrum" or "kanban"
    filterId: int | None = None
    location: JiraBoardLocation | None = None


class JiraBoardList(JiraSchema):
    maxResults: int = 0
    startAt: int = 0
    total: int | None = None
    isLast: bool = False
    values: list[JiraBoard] = []


class JiraConfigFilter(SelfLinkedSchema):
    id: str


class JiraBoardStatus(SelfLinkedSchema):
    id: str


class JiraColumn(JiraSchema):
    name: str
    statuses: list[JiraBoardStatus] = []
    min: int | None = None
    max: int | None = None


class JiraColumnConfig(JiraSchema):
    columns: list[JiraColumn] = []
    constraintType: str | None = None


class JiraRanking(JiraSchema):
    rankCustomFieldId: int | None = None


class JiraBoardConfiguration(SelfLinkedSchema):
    id: int
    name: str | None = None
    filter: JiraConfigFilter | None = None
    columnConfig: JiraColumnConfig | None = None
    estimation: JiraEstimation | None = None
    ranking: JiraRanking | None = None

    @property
    def story_points_field(self) -> str | None:
        """Extract the custom field ID used for story points."""
        if self.estimation and self.estimation.field:
            return self.estimation.field.fieldId
        return None

    @property
    def column_names(self) -> list[str]:
        if not self.columnConfig:
            return []
        return [column.name for column in self.columnConfig.columns]
