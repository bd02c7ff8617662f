"""Harness configuration."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

BrowserType = Literal["chromium", "firefox", "webkit"]


class _ConfigModel(BaseModel):
    """Accepts both camelCase JSON keys and snake_case field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _require_text(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be empty or whitespace-only")
    return stripped


class ViewportSize(_ConfigModel):
    """Browser viewport dimensions in pixels."""

    width: int = Field(1920, gt=0)
    height: int = Field(1080, gt=0)


class BrowserConfig(_ConfigModel):
    """Browser launch settings."""

    browser_type: BrowserType = "chromium"
    headless: bool = False
    timeout: int = Field(30000, gt=0, description="Default action timeout (ms)")
    viewport: ViewportSize = Field(default_factory=ViewportSize)

    @field_validator("browser_type", mode="before")
    @classmethod
    def lowercase_browser_type(cls, v: object) -> object:
        if isinstance(v, str):
            return _require_text(v).lower()
        return v


class ReportConfig(_ConfigModel):
    """Artifact output settings."""

    output_path: str = "./Reports"
    capture_screenshots: bool = True
    capture_video: bool = False

    @field_validator("output_path")
    @classmethod
    def strip_output_path(cls, v: str) -> str:
        return _require_text(v)


class MediaWikiConfig(_ConfigModel):
    """MediaWiki API client settings."""

    api_endpoint: str = "https://en.wikipedia.org/w/api.php"
    timeout: int = Field(10000, gt=0, description="Request timeout (ms)")
    max_retries: int = Field(3, ge=0, le=10)
    user_agent: str = "wikiprobe/0.1 (https://github.com/wikiprobe/wikiprobe)"

    @field_validator("api_endpoint", "user_agent")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _require_text(v)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0


class LoggingConfig(_ConfigModel):
    """Log file settings."""

    log_level: str = "Information"
    log_file_path: str = "./Reports/test-execution.log"


class HarnessConfig(_ConfigModel):
    """Root configuration, usually loaded from ``appsettings.json``."""

    base_url: str = "https://en.wikipedia.org"
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    reporting: ReportConfig = Field(default_factory=ReportConfig)
    media_wiki: MediaWikiConfig = Field(default_factory=MediaWikiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        return _require_text(v).rstrip("/")

    @classmethod
    def for_ci(cls) -> "HarnessConfig":
        """Preset for unattended runs."""
        return cls(browser=BrowserConfig(headless=True))
