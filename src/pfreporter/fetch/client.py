"""HTTP client for performance farm report pages."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from pfreporter._constants import DEFAULT_FETCH_TIMEOUT, DEFAULT_UPSTREAM_URL

logger = logging.getLogger(__name__)


class ReportSourceError(Exception):
    """Base exception for upstream report errors."""

    pass


class ReportFetchError(ReportSourceError):
    """Raised when the report page cannot be fetched."""

    pass


class ReportReadError(ReportSourceError):
    """Raised when the report body cannot be read as text."""

    pass


class ReportClient:
    """Fetches report pages from the performance farm.

    Reports live at ``{base_url}/pf/{test}/{plant}``. Failures are not
    retried; each one surfaces to the caller as a ``ReportSourceError``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_UPSTREAM_URL,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT,
    ):
        """Initialize report client.

        Args:
            base_url: Scheme and host of the performance farm
            timeout_seconds: Connect and read timeout for each request
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    def report_url(self, test: str, plant: str) -> str:
        """Return the report URL for a test and plant."""
        return f"{self.base_url}/pf/{quote(test, safe='')}/{quote(plant, safe='')}"

    def fetch_report(self, test: str, plant: str) -> str:
        """Fetch a report page and return its body text.

        The body is returned whatever the HTTP status; an error page simply
        extracts to no records.

        Raises:
            ReportFetchError: On connection errors and timeouts
            ReportReadError: If the body cannot be read or decoded
        """
        url = self.report_url(test, plant)
        logger.info(f"Fetching report {url}")

        try:
            with httpx.Client(timeout=self.timeout_seconds, follow_redirects=True) as client:
                response = client.get(url)
                text = response.text
        except (httpx.DecodingError, httpx.ReadError) as e:
            raise ReportReadError(f"Failed to read report body from {url}: {e}") from e
        except httpx.HTTPError as e:
            raise ReportFetchError(f"Failed to fetch {url}: {e}") from e

        if response.is_error:
            logger.warning(f"Upstream returned HTTP {response.status_code} for {url}")
        logger.debug(f"Fetched {len(text)} characters from {url}")
        return text
