"""tests for WebhookService against a simulated Jira"""

import json

import pytest

from jirakit import JiraNotFoundError, JiraResponseDecodeError, JiraTransportError
from jirakit.core.constants import WebhookEvent
from jirakit.schemas.jira.webhook import JiraWebhook


class TestWebhooks:
    """test webhook registration and listing"""

    def test_create_posts_registration(self, client, fake_jira):
        """the body carries name, url, events and filter"""
        fake_jira.respond_with(
            201,
            json={
                "name": "my first webhook",
                "url": "https://hooks.example.com/jira",
                "events": ["jira:issue_created"],
                "jqlFilter": "project = TEST",
                "excludeIssueDetails": True,
                "self": "https://jira.example.com/rest/webhooks/1.0/webhook/1",
                "enabled": True,
            },
        )
        webhook = JiraWebhook(
            name="my first webhook",
            url="https://hooks.example.com/jira",
            events=[WebhookEvent.ISSUE_CREATED],
            jqlFilter="project = TEST",
            excludeIssueDetails=True,
        )

        created, response = client.webhook.create(webhook)

        assert fake_jira.last.method == "POST"
        assert fake_jira.last.url.path == "/rest/webhooks/1.0/webhook"
        assert json.loads(fake_jira.last.content) == {
            "name": "my first webhook",
            "url": "https://hooks.example.com/jira",
            "events": ["jira:issue_created"],
            "jqlFilter": "project = TEST",
            "excludeIssueDetails": True,
        }
        assert created is not webhook
        assert created.self_ == "https://jira.example.com/rest/webhooks/1.0/webhook/1"
        assert webhook.self_ is None
        assert response.status_code == 201

    def test_unset_flag_is_not_sent(self, client, fake_jira):
        """excludeIssueDetails is omitted unless the caller sets it"""
        fake_jira.respond_with(201, json={"name": "hook"})

        client.webhook.create(JiraWebhook(name="hook", url="https://hooks.example.com"))

        assert "excludeIssueDetails" not in json.loads(fake_jira.last.content)

    def test_get_all(self, client, fake_jira):
        """the response is a bare JSON array of webhooks"""
        fake_jira.respond_with(
            json=[
                {"name": "a", "url": "https://a.example.com", "events": []},
                {"name": "b", "url": "https://b.example.com", "events": ["sprint_started"]},
            ]
        )

        webhooks, _ = client.webhook.get_all()

        assert fake_jira.last.method == "GET"
        assert fake_jira.last.url.path == "/rest/webhooks/1.0/webhook"
        assert [hook.name for hook in webhooks] == ["a", "b"]
        assert webhooks[1].events == [WebhookEvent.SPRINT_STARTED]

    def test_get_all_not_found(self, client, fake_jira):
        """a 404 on listing raises a not-found error carrying the response"""
        fake_jira.respond_with(404, json={"errorMessages": ["Webhooks are not available."]})

        with pytest.raises(JiraNotFoundError) as exc_info:
            client.webhook.get_all()

        assert isinstance(exc_info.value, JiraTransportError)
        assert exc_info.value.response.status_code == 404

    def test_create_with_malformed_body_is_a_decode_error(self, client, fake_jira):
        """a 201 whose body is not JSON raises a decode error, not a transport error"""
        fake_jira.respond_with(201, content=b"{not json")

        with pytest.raises(JiraResponseDecodeError) as exc_info:
            client.webhook.create(JiraWebhook(name="hook", url="https://hooks.example.com"))

        assert not isinstance(exc_info.value, JiraTransportError)
        assert exc_info.value.response.status_code == 201
