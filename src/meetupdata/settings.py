"""
Configuration module for meetupdata paths, fetch options and environment overrides.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from meetupdata.data.fetch.fetcher_base import FetchOptions

DEFAULT_GITHUB_REPO = "MrSunshyne/mauritius-meetups-data"


class Settings(BaseSettings):
    """
    Application settings using Pydantic for validation
    and environment variable support.
    """

    # Project root directory
    root_dir: Path = Field(default_factory=Path.cwd)

    # Data locations
    data_dir: Optional[Path] = Field(default=None, validate_default=True)
    metadata_file: Optional[Path] = Field(default=None, validate_default=True)
    groups_file: Optional[Path] = Field(
        default=None, description="YAML file overriding the built-in group list"
    )

    # Fetcher settings
    api_base_url: str = Field(
        default="https://meetup.mu/api/v1/get/c",
        description="Base URL; each group's endpoint is <base>/<slug>",
    )

    request_timeout: float = Field(
        default=30.0, gt=0, description="Request timeout in seconds"
    )

    max_retries: int = Field(
        default=3, ge=0, description="Retries after the first failed attempt"
    )

    retry_delay: float = Field(
        default=1.0, ge=0, description="Fixed delay between attempts in seconds"
    )

    user_agent: str = Field(default="mauritius-meetups-data-fetcher/1.0.0")

    # General settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = {
        "env_prefix": "MEETUPDATA_",
        "case_sensitive": False,
    }

    @field_validator("data_dir")
    @classmethod
    def set_data_dir(cls, v, info):
        return v or info.data.get("root_dir", Path.cwd()) / "data"

    @field_validator("metadata_file")
    @classmethod
    def set_metadata_file(cls, v, info):
        data_dir = info.data.get("data_dir") or (
            info.data.get("root_dir", Path.cwd()) / "data"
        )
        return v or data_dir / "metadata.json"

    def fetch_options(self) -> FetchOptions:
        """Build the immutable fetch options passed down to the fetcher."""
        return FetchOptions(
            timeout=self.request_timeout,
            retries=self.max_retries,
            retry_delay=self.retry_delay,
            user_agent=self.user_agent,
        )


class TriggerSettings(BaseSettings):
    """
    Credentials for the repository dispatch trigger, read from
    GITHUB_TOKEN and GITHUB_REPO.
    """

    github_token: Optional[str] = None
    github_repo: str = DEFAULT_GITHUB_REPO

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
    }
