from __future__ import annotations

from jirakit.schemas.base import JiraSchema, SelfLinkedSchema
from jirakit.schemas.jira.user import JiraUser


class JiraStatusCategory(JiraSchema):
    id: int | None = None
    key: str | None = None
    name: str | None = None


class JiraStatus(SelfLinkedSchema):
    name: str
    id: str | None = None
    statusCategory: JiraStatusCategory | None = None


class JiraIssueType(SelfLinkedSchema):
    name: str
    id: str | None = None
    subtask: bool = False
    iconUrl: str | None = None


class JiraPriority(SelfLinkedSchema):
    name: str
    id: str | None = None
    iconUrl: str | None = None


class JiraIssueFields(JiraSchema):
    """Issue fields from Jira API. Custom fields (story points, epic link, ...) land in the extras."""

    summary: str | None = None
    description: str | None = None
    status: JiraStatus | None = None
    issuetype: JiraIssueType | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    labels: list[str] = []
    duedate: str | None = None  # ISO date string "YYYY-MM-DD"
    created: str | None = None
    updated: str | None = None
    resolutiondate: str | None = None


class JiraIssue(SelfLinkedSchema):
    id: str
    key: str | None = None
    expand: str | None = None
    fields: JiraIssueFields | None = None

    def get_story_points(self, story_points_field: str | None) -> float | None:
        """Get story points from the dynamic custom field."""
        if not story_points_field or self.fields is None:
            return None
        # Custom fields are kept as extras via model_config extra="allow"
        return getattr(self.fields, story_points_field, None)


class JiraIssueList(JiraSchema):
    expand: str | None = None
    maxResults: int = 0
    startAt: int = 0
    total: int | None = None
    issues: list[JiraIssue] = []
