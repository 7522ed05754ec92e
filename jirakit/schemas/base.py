from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JiraSchema(BaseModel):
    """Shape of a Jira JSON payload. Unknown upstream fields are kept."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize into a request body, leaving out every unset field."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SelfLinkedSchema(JiraSchema):
    self_: str | None = Field(default=None, alias="self")


class OptionsSchema(BaseModel):
    """Caller-supplied options record; each set field becomes a query parameter."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
    )
