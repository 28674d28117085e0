"""
HTTP client the dashboard uses to reach the analysis proxy.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class ProxyClient:
    """Calls ``GET /api/analyze`` on the Traffic Analyzer proxy."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def analyze_url(self, domain: str) -> str:
        return f"{self.base_url}/api/analyze?domain={quote(domain, safe='')}"

    def analyze(self, domain: str) -> Any:
        """
        Look up a domain through the proxy.

        The body is decoded whatever the status code: the proxy reports
        failures as ``{"error": ...}`` and the caller decides what to show.

        Raises:
            requests.RequestException: transport failure
            ValueError: body is not valid JSON
        """
        url = self.analyze_url(domain)
        logger.debug(f"GET {url}")
        response = self.session.get(url)
        return response.json()

    def close(self):
        self.session.close()
