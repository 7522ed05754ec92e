from enum import StrEnum

# Upper bound used by the "fetch everything under a board" calls.
MAX_RESULTS_CEILING = 1000

AGILE_API = "rest/agile/1.0"
WEBHOOK_API = "/rest/webhooks/1.0"
PLATFORM_API = "/rest/api/2"


class BoardType(StrEnum):
    SCRUM = "scrum"
    KANBAN = "kanban"


class SprintState(StrEnum):
    ACTIVE = "active"
    CLOSED = "closed"
    FUTURE = "future"


class EstimationType(StrEnum):
    FIELD = "field"
    ISSUE_COUNT = "issueCount"
    NONE = "none"


class WebhookEvent(StrEnum):
    ISSUE_CREATED = "jira:issue_created"
    ISSUE_UPDATED = "jira:issue_updated"
    ISSUE_DELETED = "jira:issue_deleted"
    SPRINT_CREATED = "sprint_created"
    SPRINT_STARTED = "sprint_started"
    SPRINT_CLOSED = "sprint_closed"
    BOARD_CREATED = "board_created"
    BOARD_DELETED = "board_deleted"
