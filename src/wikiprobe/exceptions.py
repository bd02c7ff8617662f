"""Exceptions raised by wikiprobe.

Text normalization never raises; these cover the collaborators around it
(configuration, the MediaWiki API and browser interaction).
"""
from __future__ import annotations


class WikiProbeError(Exception):
    """Base exception for all wikiprobe errors."""


class ConfigurationError(WikiProbeError):
    """Configuration file missing, unreadable or invalid.

    Attributes:
        errors: Individual validation failures, one per field.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = list(errors or [])
        if self.errors:
            message = message + ":\n- " + "\n- ".join(self.errors)
        super().__init__(message)


class MediaWikiError(WikiProbeError):
    """Base exception for MediaWiki API failures."""


class MediaWikiHTTPError(MediaWikiError):
    """Request failed at the transport level or with an HTTP error status.

    ``status_code`` is 0 when no response was received.
    """

    def __init__(self, message: str, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class MediaWikiResponseError(MediaWikiError):
    """Response could not be decoded or lacks the expected structure."""


class SectionNotFoundError(MediaWikiError):
    """The requested section title does not exist on the page."""

    def __init__(self, page_title: str, section_title: str, available: list[str] | None = None) -> None:
        super().__init__(f"Section '{section_title}' not found in page '{page_title}'")
        self.page_title = page_title
        self.section_title = section_title
        self.available = list(available or [])


class ScenarioFailure(WikiProbeError):
    """A harness scenario ran to completion but its check did not hold.

    Attributes:
        details: Values observed by the check, for the report and log.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.details = dict(details or {})


class PageInteractionError(WikiProbeError):
    """A page element could not be found or used within its timeout."""

    def __init__(self, message: str, selector: str | None = None) -> None:
        super().__init__(message)
        self.selector = selector
