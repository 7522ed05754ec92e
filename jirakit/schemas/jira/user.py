from pydantic import Field, SecretStr, field_serializer

from jirakit.schemas.base import SelfLinkedSchema


class JiraUser(SelfLinkedSchema):
    """Jira user from API responses (/user, /myself, permission search).

    ``password`` is write-only: it is sent when creating a user and never
    shown in ``repr`` or logs.
    """

    key: str | None = None
    name: str | None = None
    accountId: str | None = None
    emailAddress: str | None = None
    displayName: str | None = None
    active: bool | None = None
    timeZone: str | None = None
    avatarUrls: dict[str, str] | None = None
    applicationKeys: list[str] | None = None
    password: SecretStr | None = Field(default=None, repr=False)

    @field_serializer("password", when_used="json-unless-none")
    def _reveal_password(self, password: SecretStr) -> str:
        return password.get_secret_value()

    @property
    def avatar_48(self) -> str | None:
        if self.avatarUrls:
            return self.avatarUrls.get("48x48")
        return None
