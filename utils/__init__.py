# Utils package - Utility modules organized by domain
# Import from subpackages for convenience

from .clients.similarweb import AnalysisClient, UpstreamError, get_analysis_client

__all__ = [
    "AnalysisClient",
    "UpstreamError",
    "get_analysis_client",
]
