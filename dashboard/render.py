"""
Plain-text rendering of a DashboardView for the terminal viewer.
"""

from typing import List

from dashboard.transforms import DashboardView, TrafficPoint, format_number

HEADING = "WEB TRAFFIC CHECKER"
SUBHEADING = "paste the url and check the traffic"

WIDTH = 72
BAR_WIDTH = 40


def _rule(char: str = "-") -> str:
    return char * WIDTH


def render_chart(points: List[TrafficPoint], bar_width: int = BAR_WIDTH) -> List[str]:
    """Horizontal bar chart, one row per month, scaled to the busiest month."""
    if not points:
        return ["(no traffic history)"]

    peak = max(p.visits for p in points)
    label_width = max(len(p.date) for p in points)
    lines = []
    for point in points:
        length = round(point.visits / peak * bar_width) if peak > 0 else 0
        bar = "#" * length
        lines.append(f"{point.date:<{label_width}}  {bar:<{bar_width}}  {format_number(point.visits)}")
    lines.append(f"{'':<{label_width}}  {'0':<{bar_width}}  {format_number(peak)} max")
    return lines


def render_cards(view: DashboardView) -> List[str]:
    cells = [f"{card.title}: {card.value}" for card in view.metrics]
    return ["  |  ".join(cells)] if cells else []


def render(view: DashboardView) -> str:
    """Render one full frame of the dashboard."""
    lines = [
        _rule("="),
        HEADING.center(WIDTH).rstrip(),
        SUBHEADING.center(WIDTH).rstrip(),
        _rule("="),
        f"Domain: {view.domain or '(enter domain, e.g. example.com)'}    [{view.button_label}]",
    ]

    if view.error:
        lines += ["", f"!! {view.error}"]

    if not view.report_present:
        return "\n".join(lines)

    if view.title or view.description or view.category:
        lines += ["", _rule()]
        if view.title:
            lines.append(view.title)
        if view.category:
            lines.append(f"Category: {view.category}")
        if view.description:
            lines.append(view.description)

    lines += ["", _rule()]
    lines += render_cards(view)
    if view.country_rank:
        lines.append(f"Country Rank: {view.country_rank}")
    if view.category_rank:
        lines.append(f"Category Rank: {view.category_rank}")

    lines += ["", "Traffic Trend - Monthly visits over time", _rule()]
    lines += render_chart(view.time_series)

    lines += ["", "Traffic Sources - Distribution of traffic by source", _rule()]
    if view.traffic_sources:
        name_width = max(len(name) for name, _ in view.traffic_sources)
        for name, percent in view.traffic_sources:
            lines.append(f"{name:<{name_width}}  {percent:>7}")
    else:
        lines.append("(no source data)")

    if view.top_countries:
        lines += ["", "Top Countries", _rule()]
        for country, percent in view.top_countries:
            lines.append(f"{country:<6}  {percent:>7}")

    return "\n".join(lines)
