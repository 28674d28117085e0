# Clients subpackage - External API clients
from .similarweb import AnalysisClient, UpstreamError, get_analysis_client

__all__ = [
    "AnalysisClient",
    "UpstreamError",
    "get_analysis_client",
]
