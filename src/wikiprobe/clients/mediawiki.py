"""MediaWiki ``action=parse`` client."""
from __future__ import annotations

import time
from typing import Any, Callable

import httpx
from pydantic import ValidationError

from wikiprobe.exceptions import (
    MediaWikiError,
    MediaWikiHTTPError,
    MediaWikiResponseError,
    SectionNotFoundError,
)
from wikiprobe.models.config import MediaWikiConfig
from wikiprobe.models.mediawiki import MediaWikiResponse, Section
from wikiprobe.utils.logging import get_logger

logger = get_logger("mediawiki")

# Statuses worth retrying; any other 4xx fails immediately
RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


class MediaWikiClient:
    """Fetch page sections through the MediaWiki parse API.

    Transient failures (transport errors, timeouts, 429 and 5xx) are retried
    up to ``config.max_retries`` times with ``2 ** attempt`` seconds between
    attempts.

    Example:
        with MediaWikiClient(MediaWikiConfig()) as client:
            html = client.get_page_section("Playwright_(software)", "Debugging features")
    """

    def __init__(
        self,
        config: MediaWikiConfig | None = None,
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or MediaWikiConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=self.config.timeout_seconds,
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
        )
        self._sleep = sleep

    def __enter__(self) -> "MediaWikiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get_page_section(self, page_title: str, section_title: str) -> str:
        """Return the rendered HTML of a section looked up by its title.

        Raises:
            SectionNotFoundError: No section on the page has that title.
            MediaWikiError: The API could not be reached or answered badly.
        """
        logger.info("Retrieving section '%s' from page '%s'", section_title, page_title)
        try:
            sections = self.list_sections(page_title)
            index = self._match_section(sections, section_title)
            if index == -1:
                logger.error("Section '%s' not found in page '%s'", section_title, page_title)
                raise SectionNotFoundError(
                    page_title, section_title, available=[s.line for s in sections]
                )

            content = self.parse_section_content(page_title, index)
        except MediaWikiError:
            logger.error(
                "Failed to retrieve section '%s' from page '%s'",
                section_title,
                page_title,
                exc_info=True,
            )
            raise

        logger.info("Successfully retrieved section content. Length: %d characters", len(content))
        return content

    def list_sections(self, page_title: str) -> list[Section]:
        """Return the table of contents of a page."""
        payload = self._get({
            "action": "parse",
            "page": page_title,
            "prop": "sections",
            "format": "json",
        })
        response = self._decode(payload)
        if response.parse is None or response.parse.sections is None:
            logger.error("Invalid API response structure")
            raise MediaWikiResponseError("Invalid API response structure")
        return response.parse.sections

    def find_section_index(self, page_title: str, section_title: str) -> int:
        """Return the section index for a title, or -1 if the page lacks it.

        Titles are compared case-insensitively.
        """
        logger.debug("Finding section index for '%s' in page '%s'", section_title, page_title)
        return self._match_section(self.list_sections(page_title), section_title)

    def parse_section_content(self, page_title: str, section_index: int) -> str:
        """Return the rendered HTML of a section by index."""
        logger.debug(
            "Parsing section content for page '%s', section index %d",
            page_title,
            section_index,
        )
        payload = self._get({
            "action": "parse",
            "page": page_title,
            "section": str(section_index),
            "prop": "text",
            "disableeditsection": "1",
            "format": "json",
        })
        response = self._decode(payload)
        if response.parse is None or response.parse.text is None:
            logger.error("Invalid API response structure or empty content")
            raise MediaWikiResponseError("Invalid API response structure or empty content")

        content = response.parse.text.content
        logger.debug("Successfully parsed section content. Length: %d characters", len(content))
        return content

    @staticmethod
    def _match_section(sections: list[Section], section_title: str) -> int:
        wanted = section_title.strip().casefold()
        for section in sections:
            if section.line.strip().casefold() == wanted:
                try:
                    index = int(section.index)
                except ValueError as e:
                    raise MediaWikiResponseError(
                        f"Section '{section.line}' has non-numeric index '{section.index}'"
                    ) from e
                logger.debug("Found section '%s' at index %d", section_title, index)
                return index

        logger.warning(
            "Section '%s' not found. Available sections: %s",
            section_title,
            ", ".join(s.line for s in sections),
        )
        return -1

    def _decode(self, payload: Any) -> MediaWikiResponse:
        if not isinstance(payload, dict):
            raise MediaWikiResponseError(
                f"Expected JSON object response, got {type(payload).__name__}"
            )
        if "error" in payload:
            error = payload["error"] or {}
            raise MediaWikiResponseError(
                f"API error {error.get('code', 'unknown')}: {error.get('info', 'no details')}"
            )
        try:
            return MediaWikiResponse.model_validate(payload)
        except ValidationError as e:
            raise MediaWikiResponseError(f"Invalid API response structure: {e}") from e

    def _get(self, params: dict[str, str]) -> Any:
        """GET the API endpoint with retries and return decoded JSON."""
        url = self.config.api_endpoint
        attempt = 0
        while True:
            try:
                response = self._client.get(url, params=params)
            except httpx.TimeoutException as e:
                error: MediaWikiHTTPError = MediaWikiHTTPError(
                    f"Request to {url} timed out after {self.config.timeout_seconds}s",
                    status_code=0,
                    url=url,
                )
                error.__cause__ = e
            except httpx.TransportError as e:
                error = MediaWikiHTTPError(f"Request to {url} failed: {e}", status_code=0, url=url)
                error.__cause__ = e
            else:
                if response.is_success:
                    try:
                        return response.json()
                    except ValueError as e:
                        raise MediaWikiResponseError(
                            f"Failed to parse JSON response from {url}: {e}"
                        ) from e

                error = MediaWikiHTTPError(
                    f"HTTP {response.status_code}: {response.reason_phrase}",
                    status_code=response.status_code,
                    url=url,
                )
                if response.status_code not in RETRYABLE_STATUS:
                    logger.error("API request failed. Status: %d", response.status_code)
                    raise error

            if attempt >= self.config.max_retries:
                logger.error("API request failed after %d retries: %s", attempt, error)
                raise error

            attempt += 1
            delay = 2 ** attempt
            logger.warning(
                "API call failed. Retry %d after %ds. Status: %s",
                attempt,
                delay,
                error.status_code or "no response",
            )
            self._sleep(delay)
