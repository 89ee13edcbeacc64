"""Runtime configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PARABANK_REGISTER_URL = "https://parabank.parasoft.com/parabank/register.htm"


class Settings(BaseSettings):
    """Settings for a registration run.

    Every field has a default that reproduces the fixed ParaBank run, so
    nothing needs to be set. Values can be overridden with
    ``REGISTRATION_``-prefixed environment variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="REGISTRATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Target
    registration_url: str = PARABANK_REGISTER_URL

    # Wait policy
    wait_timeout_seconds: float = Field(default=10, ge=1, le=120)
    settle_delay_seconds: float = Field(default=1.0, ge=0, le=10)
    locator_timeout_ms: int = Field(default=5000, ge=0, le=60000)

    # Browser
    browser_channel: str = "chrome"  # empty string -> bundled Chromium
    headless: bool = False
    slow_mo: int = Field(default=0, ge=0, le=1000)  # ms between actions

    # Test data
    faker_locale: str = "en_US"

    # Logging
    log_level: str = "INFO"

    @property
    def wait_timeout_ms(self) -> float:
        """Settle wait timeout in milliseconds, as Playwright expects."""
        return self.wait_timeout_seconds * 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
