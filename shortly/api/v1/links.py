import logging
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from shortly.config import settings
from shortly.dependencies import get_link_store, get_shortening_service
from shortly.models.link import ShortenInput
from shortly.schemas.link import HealthResponse, LinkResponse, ShortenRequest
from shortly.services.shortening_service import ShorteningService
from shortly.storage.strategies import LinkStoreStrategy

logger = logging.getLogger(__name__)

router = APIRouter(tags=["links"])


def _public_origin(request: Request) -> tuple:
    """Scheme and host that short URLs are built on"""
    if settings.public_base_url:
        parts = urlsplit(settings.public_base_url)
        return parts.scheme, parts.netloc
    return request.url.scheme, request.url.netloc


@router.post(
    "/shorten",
    response_model=LinkResponse,
    response_model_exclude_defaults=True,
)
async def shorten_url(
    request: Request,
    shortening_service: ShorteningService = Depends(get_shortening_service)
):
    """
    Create (or reuse) the short URL for the posted original_url.
    
    The raw body is parsed here rather than by FastAPI so that an
    unreadable body answers 400 and a malformed one answers 500.
    Service failures are mapped to 500 by the app's exception handlers.
    """
    try:
        body = await request.body()
    except ClientDisconnect as e:
        logger.warning("could not read request body: %s", e)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    try:
        payload = ShortenRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning("failed to unmarshal request body: %s", e)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    scheme, host = _public_origin(request)
    record = shortening_service.create_short_url(
        ShortenInput(original_url=payload.original_url, host=host, scheme=scheme)
    )
    return LinkResponse.model_validate(record)


@router.get("/health", response_model=HealthResponse)
def health_check(store: LinkStoreStrategy = Depends(get_link_store)):
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        storage_backend=type(store).__name__,
        links=store.count(),
    )
