from typing import Iterator, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from config import get_settings
from models import ErrorResponse, TrafficReport
from utils.clients.similarweb import AnalysisClient, UpstreamError, get_analysis_client
import logging

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()

DOMAIN_REQUIRED = "Domain is required"
FETCH_FAILED = "Failed to fetch data"


def provide_analysis_client() -> Iterator[AnalysisClient]:
    """
    Build the upstream client for one request.

    Settings are read on every call so the API key reflects the current
    environment; tests override this dependency with a fake client.
    """
    client = get_analysis_client(get_settings())
    try:
        yield client
    finally:
        client.close()


@router.get("/")
async def root():
    return {
        "service": "Traffic Analyzer",
        "status": "running",
        "endpoints": {"analyze": "/api/analyze?domain=<domain> (GET)"},
    }


@router.get(
    "/api/analyze",
    response_model=TrafficReport,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze_domain(
    domain: Optional[str] = Query(default=None, description="Domain to analyze"),
    client: AnalysisClient = Depends(provide_analysis_client),
):
    """
    Proxies a traffic analysis lookup to the upstream provider.

    The upstream body is relayed verbatim on success. Any upstream failure
    (non-2xx status, network error, malformed body) collapses into a generic
    500; provider details are only logged.
    """
    if not domain:
        return JSONResponse(status_code=400, content={"error": DOMAIN_REQUIRED})

    try:
        data = client.fetch_analysis(domain)
    except UpstreamError as e:
        logger.error(f"API Error for {domain}: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED})
    except Exception as e:
        logger.error(f"Unexpected API Error for {domain}: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED})

    # JSONResponse bypasses response_model so the body is not filtered
    return JSONResponse(status_code=200, content=data)


@router.get("/health")
async def health_check():
    return {"status": "healthy"}
