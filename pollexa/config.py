"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

RESOURCES_DIR = Path(__file__).parent / "resources"


class DataSettings(BaseModel):
    """Bundled dataset configuration."""

    # Dataset name, read from <data_dir>/<file_name>.json
    file_name: str = "posts"
    data_dir: Path = RESOURCES_DIR

    # Directory holding option images and avatars
    assets_dir: Path = RESOURCES_DIR / "assets"


class FeedSettings(BaseModel):
    """Post list configuration."""

    # Seconds a finished load waits before revealing its result, so that
    # placeholder cells stay on screen for a moment. 0 disables the wait.
    settling_delay: float = Field(default=2.5, ge=0)

    page_title: str = "Discover"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        DATA__FILE_NAME=posts
        FEED__SETTLING_DELAY=0
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows FEED__SETTLING_DELAY syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    data: DataSettings = DataSettings()
    feed: FeedSettings = FeedSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
