"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Make the flat top-level modules (main, config, routes, ...) importable
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_report():
    """Trimmed-down get-analysis payload as returned by the provider"""
    return {
        "Version": 1,
        "SiteName": "example.com",
        "Description": "example domain for illustrative use",
        "Title": "Example Domain",
        "Category": "Computers_Electronics_and_Technology",
        "GlobalRank": {"Rank": 1234},
        "CountryRank": {"Country": 840, "CountryCode": "US", "Rank": 567},
        "CategoryRank": {"Rank": "12", "Category": "Computers_Electronics_and_Technology"},
        "Engagments": {
            "BounceRate": "0.452",
            "Month": "3",
            "Year": "2024",
            "PagePerVisit": "3.1416",
            "Visits": "2300000",
            "TimeOnSite": "182.5",
        },
        "EstimatedMonthlyVisits": {
            "2024-01-01": 2100000,
            "2024-02-01": 2250000,
            "2024-03-01": 2300000,
        },
        "TrafficSources": {
            "Social": 0.021,
            "Paid Referrals": 0.004,
            "Mail": 0.002,
            "Referrals": 0.083,
            "Search": 0.41,
            "Direct": 0.48,
        },
        "TopCountryShares": [
            {"Country": 840, "CountryCode": "US", "Value": 0.351},
            {"Country": 356, "CountryCode": "IN", "Value": 0.102},
        ],
    }


@pytest.fixture
def fake_api_client():
    """Stand-in for dashboard.client.ProxyClient"""
    return MagicMock()
