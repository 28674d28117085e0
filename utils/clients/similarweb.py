"""
SimilarWeb (RapidAPI) client for Traffic Analyzer.

This module contains the single outbound call the proxy makes: one GET to the
provider's get-analysis endpoint, authenticated with the RapidAPI headers.
Each inbound request maps to exactly one upstream attempt (no retry).
"""

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


class UpstreamError(RuntimeError):
    """Raised when the analytics provider cannot produce a usable response."""


class AnalysisClient:
    """
    Client for the upstream traffic analysis API.

    The API key is an explicit constructor argument rather than an ambient
    environment lookup, so handlers and tests decide which credential is used.
    """

    def __init__(
        self,
        api_key: str,
        api_host: str,
        analysis_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the analysis client.

        Args:
            api_key: RapidAPI key (may be empty; the provider then rejects the call)
            api_host: Value sent as x-rapidapi-host
            analysis_url: Full URL of the get-analysis endpoint
            timeout: Optional request timeout in seconds
            session: Optional requests session (a new one is created if omitted)
        """
        self.api_key = api_key or ""
        self.api_host = api_host
        self.analysis_url = analysis_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def headers(self) -> dict:
        return {
            "x-rapidapi-key": self.api_key,
            "x-rapidapi-host": self.api_host,
        }

    def fetch_analysis(self, domain: str) -> Any:
        """
        Fetch the traffic report for a domain.

        Args:
            domain: Domain name, forwarded as the ``domain`` query parameter

        Returns:
            The decoded JSON body, untouched

        Raises:
            UpstreamError: on transport failure, non-2xx status or a body that
                is not valid JSON
        """
        logger.debug(f"Fetching traffic analysis for {domain}")
        try:
            response = self.session.get(
                self.analysis_url,
                params={"domain": domain},
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Request to analytics API failed: {e}") from e

        if not response.ok:
            raise UpstreamError(f"API responded with status: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"API returned a malformed body: {e}") from e

    def close(self):
        self.session.close()


def get_analysis_client(settings) -> AnalysisClient:
    """Build an AnalysisClient from a Settings instance."""
    return AnalysisClient(
        api_key=settings.RAPIDAPI_KEY,
        api_host=settings.RAPIDAPI_HOST,
        analysis_url=settings.analysis_url,
        timeout=settings.UPSTREAM_TIMEOUT,
    )
