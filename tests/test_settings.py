"""
Tests for the meetupdata settings module.
"""

import os
from pathlib import Path

from meetupdata.data.fetch.fetcher_base import FetchOptions
from meetupdata.settings import DEFAULT_GITHUB_REPO, Settings, TriggerSettings


class TestSettings:
    """Test cases for the Settings class."""

    def test_default_settings(self):
        """Test that default settings are correctly initialized."""
        settings = Settings()

        assert settings.request_timeout == 30.0
        assert settings.max_retries == 3
        assert settings.retry_delay == 1.0
        assert settings.log_level == "INFO"
        assert settings.api_base_url == "https://meetup.mu/api/v1/get/c"
        assert settings.user_agent == "mauritius-meetups-data-fetcher/1.0.0"
        assert settings.groups_file is None

    def test_directory_derivation(self, temp_dir):
        """Test data paths are derived from root_dir."""
        settings = Settings(root_dir=temp_dir)

        assert settings.data_dir == temp_dir / "data"
        assert settings.metadata_file == temp_dir / "data" / "metadata.json"

    def test_metadata_file_follows_data_dir(self, temp_dir):
        """Test an explicit data_dir moves the default ledger with it."""
        settings = Settings(root_dir=temp_dir, data_dir=temp_dir / "out")

        assert settings.metadata_file == temp_dir / "out" / "metadata.json"

    def test_custom_settings(self, temp_dir):
        """Test settings with custom values."""
        settings = Settings(
            root_dir=temp_dir,
            metadata_file=temp_dir / "ledger.json",
            max_retries=0,
            request_timeout=2.5,
        )

        assert settings.metadata_file == temp_dir / "ledger.json"
        assert settings.max_retries == 0
        assert settings.request_timeout == 2.5

    def test_no_directories_created(self, temp_dir):
        """Test building settings has no filesystem side effects."""
        Settings(root_dir=temp_dir)
        assert list(temp_dir.iterdir()) == []

    def test_environment_variable_override(self, temp_dir, monkeypatch):
        """Test that environment variables override default settings."""
        monkeypatch.setenv("MEETUPDATA_MAX_RETRIES", "5")
        monkeypatch.setenv("MEETUPDATA_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("MEETUPDATA_DATA_DIR", str(temp_dir / "elsewhere"))

        settings = Settings(root_dir=temp_dir)

        assert settings.max_retries == 5
        assert settings.log_level == "WARNING"
        assert settings.data_dir == temp_dir / "elsewhere"
        assert settings.metadata_file == temp_dir / "elsewhere" / "metadata.json"

    def test_path_types(self, temp_dir):
        """Test that directory settings are Path objects."""
        settings = Settings(root_dir=str(temp_dir))

        assert isinstance(settings.root_dir, Path)
        assert isinstance(settings.data_dir, Path)
        assert isinstance(settings.metadata_file, Path)

    def test_fetch_options(self):
        """Test fetch options mirror the settings."""
        settings = Settings(request_timeout=10, max_retries=1, retry_delay=0.25)

        assert settings.fetch_options() == FetchOptions(
            timeout=10, retries=1, retry_delay=0.25
        )


class TestTriggerSettings:
    """Test cases for the trigger credentials."""

    def test_reads_github_env(self, monkeypatch):
        """Test GITHUB_TOKEN and GITHUB_REPO are picked up without a prefix."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
        monkeypatch.setenv("GITHUB_REPO", "someone/fork")

        settings = TriggerSettings()

        assert settings.github_token == "ghp_test"
        assert settings.github_repo == "someone/fork"

    def test_defaults(self, monkeypatch):
        """Test the token is optional and the repo has a default."""
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.delenv("GITHUB_REPO", raising=False)

        settings = TriggerSettings()

        assert settings.github_token is None
        assert settings.github_repo == DEFAULT_GITHUB_REPO
