from jirakit.schemas.base import SelfLinkedSchema


class JiraWebhook(SelfLinkedSchema):
    """Webhook registration. ``excludeIssueDetails`` drops issue payloads from delivered events."""

    name: str | None = None
    url: str | None = None
    events: list[str] | None = None
    jqlFilter: str | None = None
    excludeIssueDetails: bool | None = None
    enabled: bool | None = None
