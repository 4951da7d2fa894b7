"""
Client configuration from environment variables.
Settings class using pydantic-settings with optional validation.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads when running from the repo or elsewhere
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_HOST = "http://localhost:8080/v1/"


class Settings(BaseSettings):
    """
    Client settings loaded from environment and .env.
    All fields optional with defaults for a local fake account API.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Base URL of the API; must keep its trailing slash so relative paths resolve under it.
    form3_host: str = Field(
        default=DEFAULT_HOST,
        description="Base URL of the Form3 API, e.g. http://localhost:8080/v1/",
        validation_alias="FORM3_HOST",
    )
    timeout: float = Field(
        default=30.0,
        description="Default per-request timeout in seconds",
        validation_alias="FORM3_TIMEOUT",
    )
    user_agent: str = Field(
        default="form3-accounts-client",
        description="User-Agent header sent with every request",
        validation_alias="FORM3_USER_AGENT",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("form3_host", mode="before")
    @classmethod
    def normalize_host(cls, v: object) -> str:
        """Empty env value falls back to the default host."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_HOST
        return str(v).strip()

    def validate_base_url(self) -> None:
        """
        Call before building a client from these settings.
        Raises ValueError when FORM3_HOST has no trailing slash.
        """
        check_base_url(self.form3_host)


def check_base_url(base_url: str) -> None:
    """Raise ValueError unless base_url ends with a path separator."""
    if not base_url.endswith("/"):
        raise ValueError(f"Base URL must have a trailing slash: {base_url!r}")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
