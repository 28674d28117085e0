"""
AnalysisClient tests (upstream session mocked)
"""

from unittest.mock import MagicMock

import pytest
import requests

from config import Settings
from utils.clients.similarweb import AnalysisClient, UpstreamError, get_analysis_client

ANALYSIS_URL = "https://similar-web.p.rapidapi.com/get-analysis"


def _client(session, api_key="test-key"):
    return AnalysisClient(
        api_key=api_key,
        api_host="similar-web.p.rapidapi.com",
        analysis_url=ANALYSIS_URL,
        session=session,
    )


def _response(status_code=200, body=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


class TestFetchAnalysis:

    def test_sends_domain_and_rapidapi_headers(self):
        session = MagicMock()
        session.get.return_value = _response(body={"Title": "Example"})

        result = _client(session).fetch_analysis("example.com")

        assert result == {"Title": "Example"}
        session.get.assert_called_once_with(
            ANALYSIS_URL,
            params={"domain": "example.com"},
            headers={
                "x-rapidapi-key": "test-key",
                "x-rapidapi-host": "similar-web.p.rapidapi.com",
            },
            timeout=None,
        )

    def test_empty_key_is_still_sent(self):
        session = MagicMock()
        session.get.return_value = _response(status_code=401, body={"message": "Invalid API key"})

        with pytest.raises(UpstreamError):
            _client(session, api_key=None).fetch_analysis("example.com")

        assert session.get.call_args.kwargs["headers"]["x-rapidapi-key"] == ""

    def test_non_2xx_raises(self):
        session = MagicMock()
        session.get.return_value = _response(status_code=429, body={"message": "Too many requests"})

        with pytest.raises(UpstreamError, match="429"):
            _client(session).fetch_analysis("example.com")

    def test_network_error_raises(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(UpstreamError, match="read timed out"):
            _client(session).fetch_analysis("example.com")

    def test_malformed_body_raises(self):
        session = MagicMock()
        session.get.return_value = _response(json_error=ValueError("Expecting value"))

        with pytest.raises(UpstreamError, match="malformed"):
            _client(session).fetch_analysis("example.com")

    def test_single_attempt(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(UpstreamError):
            _client(session).fetch_analysis("example.com")

        assert session.get.call_count == 1


class TestGetAnalysisClient:

    def test_built_from_settings(self):
        settings = Settings(
            RAPIDAPI_KEY="from-settings",
            UPSTREAM_BASE_URL="https://upstream.test/",
            UPSTREAM_TIMEOUT=5.0,
        )

        client = get_analysis_client(settings)

        assert client.api_key == "from-settings"
        assert client.api_host == "similar-web.p.rapidapi.com"
        assert client.analysis_url == "https://upstream.test/get-analysis"
        assert client.timeout == 5.0
