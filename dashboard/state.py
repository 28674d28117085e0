"""
View states for the traffic dashboard.

The dashboard is always in exactly one of four states. Each state carries the
last successfully fetched report (if any) so results stay on screen while a
new lookup is loading or after it fails.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class Idle:
    """No lookup has been made yet."""

    report: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class Loading:
    """A lookup is in flight."""

    report: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class Success:
    """The most recent lookup returned a report."""

    report: Mapping[str, Any]


@dataclass(frozen=True)
class Failed:
    """The most recent lookup failed; ``report`` is the previous good one."""

    message: str
    report: Optional[Mapping[str, Any]] = None


DashboardState = Union[Idle, Loading, Success, Failed]


def is_loading(state: DashboardState) -> bool:
    return isinstance(state, Loading)


def error_message(state: DashboardState) -> Optional[str]:
    return state.message if isinstance(state, Failed) else None
