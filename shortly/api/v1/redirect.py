import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse

from shortly.dependencies import get_resolution_service
from shortly.services.resolution_service import ResolutionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["redirect"])


@router.get("/", include_in_schema=False)
def redirect_without_id():
    """A bare "/" carries no identifier to resolve"""
    logger.warning("no id path given, can't redirect")
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/{link_id}")
def redirect_to_original_url(
    link_id: str,
    resolution_service: ResolutionService = Depends(get_resolution_service)
):
    """
    Redirect to the original URL.
    
    Plain def: FastAPI runs it on its worker thread pool, one thread per
    request, all sharing the link store's read lock.
    An unknown id raises NotFoundError, which the app answers with 204.
    """
    record = resolution_service.resolve(link_id)
    return RedirectResponse(
        url=record.original_url,
        status_code=status.HTTP_301_MOVED_PERMANENTLY
    )
