"""Tests for configuration models and appsettings.json loading."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from wikiprobe.config import CONFIG_ENV_VAR, find_config_file, load_config, parse_config
from wikiprobe.exceptions import ConfigurationError
from wikiprobe.models.config import (
    BrowserConfig,
    HarnessConfig,
    LoggingConfig,
    MediaWikiConfig,
    ReportConfig,
)

APPSETTINGS = """
{
  // Target wiki
  "baseUrl": "https://en.wikipedia.org/",
  "browser": {
    "browserType": "Firefox",
    "headless": true,
    "timeout": 15000,
    "viewport": { "width": 1280, "height": 720 },
  },
  /* API client */
  "mediaWiki": {
    "apiEndpoint": "https://en.wikipedia.org/w/api.php",
    "timeout": 5000,
    "maxRetries": 2
  },
  "reporting": { "outputPath": "./out", "captureScreenshots": false },
  "logging": { "logLevel": "Debug", "logFilePath": "./out/run.log" },
}
"""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TestHarnessConfigDefaults:

    def test_defaults(self):
        config = HarnessConfig()
        assert config.base_url == "https://en.wikipedia.org"
        assert config.browser.browser_type == "chromium"
        assert config.browser.headless is False
        assert config.browser.timeout == 30000
        assert config.browser.viewport.width == 1920
        assert config.browser.viewport.height == 1080
        assert config.reporting.output_path == "./Reports"
        assert config.reporting.capture_screenshots is True
        assert config.reporting.capture_video is False
        assert config.media_wiki.api_endpoint == "https://en.wikipedia.org/w/api.php"
        assert config.media_wiki.max_retries == 3
        assert config.logging.log_level == "Information"

    def test_for_ci_is_headless(self):
        assert HarnessConfig.for_ci().browser.headless is True

    def test_snake_case_names_accepted(self):
        config = HarnessConfig(base_url="https://test.wikipedia.org/")
        assert config.base_url == "https://test.wikipedia.org"

    def test_timeout_seconds(self):
        assert MediaWikiConfig(timeout=2500).timeout_seconds == 2.5

    def test_browser_type_case_insensitive(self):
        assert BrowserConfig(browser_type="WebKit").browser_type == "webkit"

    @pytest.mark.parametrize("kwargs", [
        {"timeout": 0},
        {"browser_type": "netscape"},
        {"browser_type": "  "},
    ])
    def test_invalid_browser(self, kwargs):
        with pytest.raises(ValueError):
            BrowserConfig(**kwargs)

    def test_invalid_max_retries(self):
        with pytest.raises(ValueError):
            MediaWikiConfig(max_retries=-1)

    def test_blank_output_path(self):
        with pytest.raises(ValueError):
            ReportConfig(output_path="   ")

    def test_logging_defaults(self):
        assert LoggingConfig().log_file_path == "./Reports/test-execution.log"


# ---------------------------------------------------------------------------
# parse_config
# ---------------------------------------------------------------------------


class TestParseConfig:

    def test_comments_and_trailing_commas(self):
        config = parse_config(APPSETTINGS)
        assert config.base_url == "https://en.wikipedia.org"
        assert config.browser.browser_type == "firefox"
        assert config.browser.headless is True
        assert config.browser.viewport.width == 1280
        assert config.media_wiki.timeout == 5000
        assert config.media_wiki.max_retries == 2
        assert config.reporting.output_path == "./out"
        assert config.reporting.capture_screenshots is False
        assert config.logging.log_level == "Debug"

    def test_urls_keep_double_slashes(self):
        config = parse_config('{"baseUrl": "https://de.wikipedia.org"}')
        assert config.base_url == "https://de.wikipedia.org"

    def test_missing_sections_use_defaults(self):
        config = parse_config("{}")
        assert config == HarnessConfig()

    def test_unknown_keys_ignored(self):
        config = parse_config('{"somethingElse": 1}')
        assert config.base_url == "https://en.wikipedia.org"

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_empty(self, text):
        with pytest.raises(ConfigurationError, match="empty"):
            parse_config(text)

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            parse_config('{"baseUrl": }')

    def test_not_an_object(self):
        with pytest.raises(ConfigurationError, match="JSON object"):
            parse_config("[1, 2]")

    def test_validation_errors_are_collected(self):
        text = json.dumps({"baseUrl": "  ", "browser": {"timeout": 0}})
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config(text)

        errors = exc_info.value.errors
        assert len(errors) == 2
        assert any(e.startswith("baseUrl:") for e in errors)
        assert any(e.startswith("browser.timeout:") for e in errors)
        assert "Configuration validation failed" in str(exc_info.value)


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text(APPSETTINGS, encoding="utf-8")
        assert load_config(path).browser.browser_type == "firefox"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.json")

    def test_env_var(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "env.json"
        path.write_text('{"baseUrl": "https://fr.wikipedia.org"}', encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().base_url == "https://fr.wikipedia.org"

    def test_default_location(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        assert find_config_file() == tmp_path / "appsettings.json"

    def test_explicit_path_wins_over_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.json"))
        assert find_config_file(tmp_path / "explicit.json") == tmp_path / "explicit.json"
