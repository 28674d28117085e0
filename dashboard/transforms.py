"""
Pure transformations from a traffic report to display-ready values.

Nothing here is stored: the view is rebuilt from the current state on every
render. Missing or malformed fields never raise; they render as ``N/A`` or
are left out.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional, Tuple

from dashboard.state import DashboardState, error_message, is_loading

NOT_AVAILABLE = "N/A"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class TrafficPoint:
    date: str  # "Jan 2024"
    visits: float


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: str


@dataclass
class DashboardView:
    """Everything the renderer needs for one frame."""

    domain: str
    button_label: str
    button_disabled: bool
    error: Optional[str] = None
    report_present: bool = False
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    metrics: List[MetricCard] = field(default_factory=list)
    time_series: List[TrafficPoint] = field(default_factory=list)
    traffic_sources: List[Tuple[str, str]] = field(default_factory=list)
    country_rank: Optional[str] = None
    category_rank: Optional[str] = None
    top_countries: List[Tuple[str, str]] = field(default_factory=list)


# ----------------------------------------------------------------------
# Number helpers
# ----------------------------------------------------------------------

def format_number(num: float) -> str:
    """
    Compact magnitude formatting used for visit totals and chart labels.

    >>> format_number(1500)
    '1.5K'
    """
    if num >= 1_000_000_000:
        return f"{num / 1_000_000_000:.1f}B"
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


def to_number(value: Any) -> Optional[float]:
    """Coerce provider values (often numeric strings) to float, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_percent(share: Any) -> str:
    number = to_number(share)
    if number is None:
        return NOT_AVAILABLE
    return f"{number * 100:.1f}%"


def format_decimal(value: Any) -> str:
    number = to_number(value)
    if number is None:
        return NOT_AVAILABLE
    return f"{number:.1f}"


def format_compact(value: Any) -> str:
    number = to_number(value)
    if number is None:
        return NOT_AVAILABLE
    return format_number(number)


def format_rank(value: Any) -> str:
    number = to_number(value)
    if number is None:
        return NOT_AVAILABLE
    return f"#{int(number):,}"


# ----------------------------------------------------------------------
# Dates
# ----------------------------------------------------------------------

def _parse_date(key: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(key)
    except ValueError:
        pass
    for fmt in ("%Y-%m", "%Y-%m-%dT%H:%M:%S.%fZ", "%Y-%m-%dT%H:%M:%SZ"):
        try:
            return datetime.strptime(key, fmt)
        except ValueError:
            continue
    return None


def format_month_label(key: Any) -> str:
    """Turn ``"2024-01-01"`` into ``"Jan 2024"``; unparseable keys pass through."""
    parsed = _parse_date(key) if isinstance(key, str) else None
    if parsed is None:
        return str(key)
    return f"{_MONTHS[parsed.month - 1]} {parsed.year}"


# ----------------------------------------------------------------------
# Report sections
# ----------------------------------------------------------------------

def _section(report: Optional[Mapping[str, Any]], key: str) -> Mapping[str, Any]:
    if not report:
        return {}
    value = report.get(key)
    return value if isinstance(value, Mapping) else {}


def build_time_series(report: Optional[Mapping[str, Any]]) -> List[TrafficPoint]:
    """Monthly visits in the mapping's own order; empty without a report."""
    points = []
    for date, visits in _section(report, "EstimatedMonthlyVisits").items():
        number = to_number(visits)
        points.append(TrafficPoint(date=format_month_label(date), visits=number or 0))
    return points


def build_traffic_sources(report: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    # Provider order is kept, no sorting by share
    return [
        (source, format_percent(share))
        for source, share in _section(report, "TrafficSources").items()
    ]


def build_metrics(report: Optional[Mapping[str, Any]]) -> List[MetricCard]:
    engagements = _section(report, "Engagments")
    return [
        MetricCard("Global Rank", format_rank(_section(report, "GlobalRank").get("Rank"))),
        MetricCard("Bounce Rate", format_percent(engagements.get("BounceRate"))),
        MetricCard("Pages/Visit", format_decimal(engagements.get("PagePerVisit"))),
        MetricCard("Monthly Visits", format_compact(engagements.get("Visits"))),
    ]


def build_country_rank(report: Optional[Mapping[str, Any]]) -> Optional[str]:
    country_rank = _section(report, "CountryRank")
    if to_number(country_rank.get("Rank")) is None:
        return None
    rank = format_rank(country_rank.get("Rank"))
    code = country_rank.get("CountryCode")
    return f"{rank} in {code}" if code else rank


def build_category_rank(report: Optional[Mapping[str, Any]]) -> Optional[str]:
    category_rank = _section(report, "CategoryRank")
    if to_number(category_rank.get("Rank")) is None:
        return None
    rank = format_rank(category_rank.get("Rank"))
    category = category_rank.get("Category")
    return f"{rank} in {category}" if category else rank


def build_top_countries(report: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    shares = report.get("TopCountryShares") if report else None
    if not isinstance(shares, list):
        return []
    rows = []
    for entry in shares:
        if not isinstance(entry, Mapping):
            continue
        label = entry.get("CountryCode") or str(entry.get("Country", NOT_AVAILABLE))
        rows.append((label, format_percent(entry.get("Value"))))
    return rows


def _text(report: Optional[Mapping[str, Any]], key: str) -> Optional[str]:
    value = report.get(key) if report else None
    return value if isinstance(value, str) and value else None


def build_view(state: DashboardState, domain: str = "") -> DashboardView:
    """Compose the full view for the given state and domain input."""
    loading = is_loading(state)
    report = state.report
    view = DashboardView(
        domain=domain,
        button_label="Analyzing..." if loading else "Analyze",
        button_disabled=loading,
        error=error_message(state),
        report_present=report is not None,
    )
    if report is None:
        return view

    view.title = _text(report, "Title")
    view.description = _text(report, "Description")
    view.category = _text(report, "Category")
    view.metrics = build_metrics(report)
    view.time_series = build_time_series(report)
    view.traffic_sources = build_traffic_sources(report)
    view.country_rank = build_country_rank(report)
    view.category_rank = build_category_rank(report)
    view.top_countries = build_top_countries(report)
    return view
