"""Short link routes: create and redirect."""

from fastapi import APIRouter, Request, Response, status
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from hexlink.common.headers import build_base_url
from hexlink.common.url_builder import build_location_header, build_short_url
from hexlink.exceptions import MalformedRequestError
from ..api.schemas import ErrorResponse, ShortenRequest, ShortenResponse

router = APIRouter()


# Store access happens on a worker thread: one thread per in-flight request.

@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body or invalid URL"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ShortenRequest.model_json_schema()}},
        },
    },
    summary="Create short URL",
    description="Store a URL and return the short URL that redirects to it.",
)
async def shorten_url(request: Request):
    """Create a shortened URL.

    The body is decoded as JSON whatever Content-Type the client sent.
    """
    service = request.app.state.service
    config = request.app.state.config

    try:
        body = ShortenRequest.model_validate_json(await request.body())
    except ValidationError as e:
        raise MalformedRequestError(f"{e.error_count()} validation error(s)") from e

    short_key = await run_in_threadpool(service.shorten, body.url)
    request.state.short_key = short_key

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        trust_forwarded=config.trust_forwarded_headers,
    )

    return ShortenResponse(
        short_url=build_short_url(
            short_key=short_key,
            base_url=base_url,
            path_prefix=config.path_prefix,
        ),
    )


@router.get(
    "/{short_key}",
    status_code=status.HTTP_301_MOVED_PERMANENTLY,
    response_class=Response,
    responses={
        301: {"description": "Redirect to the original URL"},
        404: {"model": ErrorResponse, "description": "Short key not found"},
    },
    summary="Resolve short URL",
)
def redirect_to_url(request: Request, short_key: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    original_url = service.resolve(short_key)

    return Response(
        status_code=status.HTTP_301_MOVED_PERMANENTLY,
        headers={"Location": build_location_header(original_url)},
    )
