"""Suite settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettleTiming(BaseModel):
    """Bounds for condition polling after asynchronous UI updates."""

    model_config = {"frozen": True}

    timeout_ms: int = Field(default=5_000, ge=1)
    poll_interval_ms: int = Field(default=250, ge=1)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000


class Settings(BaseSettings):
    """Portfolio E2E configuration from E2E_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Target site
    base_url: str = Field(
        default="https://chirangv.com", description="Root URL of the site under test"
    )

    # Browser
    browser: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium", description="Playwright browser engine"
    )
    headless: bool = Field(default=True, description="Run the browser headless")
    slow_mo: int = Field(default=0, ge=0, description="Delay between actions (ms)")
    timeout: int = Field(
        default=30_000, ge=1, description="Default per-action timeout (ms)"
    )
    viewport_width: int = Field(default=1920, ge=1, description="Viewport width")
    viewport_height: int = Field(default=1080, ge=1, description="Viewport height")

    # Failure artifacts
    video_on_failure: bool = Field(
        default=False, description="Keep a video recording of failed tests"
    )
    screenshot_on_failure: bool = Field(
        default=True, description="Attach a screenshot to failed tests"
    )
    artifacts_dir: Path = Field(
        default=Path("test-results"), description="Where attachments are written"
    )

    # Condition polling (replaces fixed settle delays)
    settle_timeout: int = Field(
        default=5_000, ge=1, description="Upper bound for settle polling (ms)"
    )
    poll_interval: int = Field(default=250, ge=1, description="Polling interval (ms)")

    # Data
    test_data_path: Path = Field(
        default=Path("tests/e2e/fixtures/test_data.json"),
        description="JSON fixture with test users and login scenarios",
    )
    selector_overrides_path: Path | None = Field(
        default=None, description="Optional JSON file overriding selector matchers"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format and drop the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def viewport(self) -> dict[str, int]:
        """Viewport in the shape Playwright's new_context expects."""
        return {"width": self.viewport_width, "height": self.viewport_height}

    @property
    def settle_timing(self) -> SettleTiming:
        return SettleTiming(
            timeout_ms=self.settle_timeout, poll_interval_ms=self.poll_interval
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
