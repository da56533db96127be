"""Tests for configuration and message catalogs."""

from pathlib import Path

import pytest

from cdidc.config import Settings, default_browser_command, get_settings
from cdidc.i18n import _, setup_translation


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self) -> None:
        """Device is left to libdiscid and logging is quiet."""
        settings = Settings()

        assert settings.device is None
        assert settings.browser == default_browser_command()
        assert settings.log_level == "WARNING"
        assert not settings.log_json

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """CDIDC_ variables configure the run."""
        monkeypatch.setenv("CDIDC_DEVICE", "/dev/sr1")
        monkeypatch.setenv("CDIDC_BROWSER", "firefox")
        monkeypatch.setenv("CDIDC_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.device == "/dev/sr1"
        assert settings.browser == "firefox"
        assert settings.log_level == "DEBUG"

    def test_locale_dir_expands_home(self) -> None:
        """A ~ in the catalog directory is expanded."""
        settings = Settings(locale_dir="~/locale")

        assert settings.locale_dir == Path("~/locale").expanduser()

    def test_browser_command_per_platform(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """macOS uses open, everything else xdg-open."""
        monkeypatch.setattr("sys.platform", "darwin")
        assert default_browser_command() == "open"

        monkeypatch.setattr("sys.platform", "linux")
        assert default_browser_command() == "xdg-open"


class TestTranslation:
    """Test message catalog fallback."""

    def test_missing_catalog_falls_back_to_english(self, tmp_path: Path) -> None:
        """Without a compiled catalog messages are returned unchanged."""
        setup_translation(tmp_path)

        assert _("Submission URL: %s\n") == "Submission URL: %s\n"
