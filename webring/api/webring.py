from typing import Optional
from fastapi import APIRouter, Depends

from webring.core.exceptions.exceptions import MissingParameterError
from webring.schemas.webring import ErrorResponse, UrlListResponse, UrlResponse
from webring.services.ring_cache import RingCache, get_ring_cache

router = APIRouter(tags=["Webring"])

NAVIGATION_RESPONSES = {
    400: {"description": "Missing `current` parameter", "model": ErrorResponse},
    404: {"description": "No webring URLs available", "model": ErrorResponse},
}


def _require_current(current: Optional[str]) -> str:
    # an empty value counts as missing
    if not current:
        raise MissingParameterError("current")
    return current


@router.get("/next", response_model=UrlResponse, responses=NAVIGATION_RESPONSES,
            summary="Get the next webring URL")
def next_url(current: Optional[str] = None, ring: RingCache = Depends(get_ring_cache)) -> UrlResponse:
    """Return the URL after `current`, wrapping past the end.

    An unknown `current` gets the first URL of the ring.
    """
    return UrlResponse(url=ring.next_url(_require_current(current)))


@router.get("/previous", response_model=UrlResponse, responses=NAVIGATION_RESPONSES,
            summary="Get the previous webring URL")
def previous_url(current: Optional[str] = None, ring: RingCache = Depends(get_ring_cache)) -> UrlResponse:
    """Return the URL before `current`, wrapping past the start.

    An unknown `current` gets the last URL of the ring.
    """
    return UrlResponse(url=ring.previous_url(_require_current(current)))


@router.get("/random", response_model=UrlResponse,
            responses={404: NAVIGATION_RESPONSES[404]}, summary="Get a random webring URL")
def random_url(ring: RingCache = Depends(get_ring_cache)) -> UrlResponse:
    return UrlResponse(url=ring.random_url())


@router.get("/list", response_model=UrlListResponse, summary="Get all webring URLs")
def list_urls(ring: RingCache = Depends(get_ring_cache)) -> UrlListResponse:
    urls = ring.list_urls()
    return UrlListResponse(urls=urls, count=len(urls))
