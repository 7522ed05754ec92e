from jirakit.core.constants import WEBHOOK_API
from jirakit.schemas.jira.webhook import JiraWebhook
from jirakit.services.resource import ApiResult, ResourceOperation, ResourceService


class WebhookService(ResourceService):
    """Webhook registration. Delivery is handled by whoever owns ``url``."""

    _create: ResourceOperation[JiraWebhook] = ResourceOperation("POST", f"{WEBHOOK_API}/webhook", JiraWebhook)
    _get_all: ResourceOperation[list[JiraWebhook]] = ResourceOperation(
        "GET", f"{WEBHOOK_API}/webhook", list[JiraWebhook]
    )

    def create(self, webhook: JiraWebhook) -> ApiResult[JiraWebhook]:
        return self._execute(self._create, body=webhook)

    def get_all(self) -> ApiResult[list[JiraWebhook]]:
        """All webhooks registered on the instance."""
        return self._execute(self._get_all)
