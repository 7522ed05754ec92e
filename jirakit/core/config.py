from functools import lru_cache

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JIRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Instance
    base_url: str = Field(description="Jira instance root URL (e.g., https://jira.example.com)")

    # Credentials
    username: str | None = Field(default=None, description="Username or email used for basic auth")
    api_token: SecretStr | None = Field(default=None, description="API token or password for basic auth")

    # Network
    proxy_url: str | None = Field(
        default=None,
        description="HTTP/HTTPS proxy URL (e.g., http://proxy.example.com:8080)",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    max_attempts: int = Field(
        default=1,
        ge=1,
        description="Attempts per request on rate limit or timeout (1 disables retries)",
    )

    # Logging
    debug: bool = Field(default=False)
    log_file: str | None = Field(default=None, description="Optional path of a rotated log file")

    @computed_field
    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.api_token)


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore
