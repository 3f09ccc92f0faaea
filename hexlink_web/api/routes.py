"""API routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from hexlink.common.headers import build_base_url
from hexlink.common.url_builder import build_short_url
from .schemas import ErrorResponse, HealthResponse, URLInfoResponse

router = APIRouter()


@router.get(
    "/urls/{short_key}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short key not found"},
    },
    summary="Get URL information",
    description="Look up a short key without being redirected.",
)
def get_url_info(request: Request, short_key: str):
    """Get information about a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config

    entry = service.get_entry(short_key)

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        trust_forwarded=config.trust_forwarded_headers,
    )

    return URLInfoResponse(
        **entry.to_dict(),
        short_url=build_short_url(entry.key, base_url, config.path_prefix),
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        total_urls=health["total_urls"],
        timestamp=datetime.now(timezone.utc),
    )
