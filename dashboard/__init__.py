# Dashboard package - terminal client for the analysis proxy
from .client import ProxyClient
from .controller import DashboardController
from .state import DashboardState, Failed, Idle, Loading, Success
from .transforms import DashboardView, build_view, format_number
from .render import render

__all__ = [
    "ProxyClient",
    "DashboardController",
    "DashboardState",
    "Idle",
    "Loading",
    "Success",
    "Failed",
    "DashboardView",
    "build_view",
    "format_number",
    "render",
]
