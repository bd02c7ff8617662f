"""wikiprobe data models."""
from wikiprobe.models.config import (
    BrowserConfig,
    HarnessConfig,
    LoggingConfig,
    MediaWikiConfig,
    ReportConfig,
    ViewportSize,
)
from wikiprobe.models.mediawiki import (
    MediaWikiResponse,
    ParseResult,
    Section,
    TextContent,
)
from wikiprobe.models.result import (
    ChangeType,
    ComparisonResult,
    DiffLine,
    DiffPane,
    DiffResult,
    ScenarioOutcome,
    SuiteStatistics,
)

__all__ = [
    "BrowserConfig",
    "HarnessConfig",
    "LoggingConfig",
    "MediaWikiConfig",
    "ReportConfig",
    "ViewportSize",
    "MediaWikiResponse",
    "ParseResult",
    "Section",
    "TextContent",
    "ChangeType",
    "ComparisonResult",
    "DiffLine",
    "DiffPane",
    "DiffResult",
    "ScenarioOutcome",
    "SuiteStatistics",
]
