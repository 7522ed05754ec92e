"""shared fixtures: a JiraClient wired to an in-memory httpx transport"""

from collections.abc import Callable

import httpx
import pytest

from jirakit import JiraClient

BASE_URL = "https://jira.example.com"


class FakeJira:
    """records every request and answers with a queued or default response"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def respond_with(self, status_code: int = 200, **kwargs) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_jira() -> FakeJira:
    return FakeJira()


@pytest.fixture
def client(fake_jira: FakeJira):
    jira = JiraClient(
        BASE_URL,
        "alice",
        "secret-token",
        transport=httpx.MockTransport(fake_jira),
    )
    yield jira
    jira.close()
