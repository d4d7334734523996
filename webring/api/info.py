from fastapi import APIRouter

from webring.config.settings import settings
from webring.schemas.webring import ServiceInfo

router = APIRouter(tags=["Info"])

SERVICE_NAME = "Lemonade Stand Anarchy WebRing API"
SERVICE_VERSION = "1.0.0"

ENDPOINTS = {
    '/next': 'Get next webring URL (requires ?current=URL parameter)',
    '/previous': 'Get previous webring URL (requires ?current=URL parameter)',
    '/random': 'Get random webring URL',
    '/list': 'Get all webring URLs',
    '/pictures/:filename': 'Get a specific picture from the pictures directory',
    '/pictures/list': 'Get all available pictures',
}


@router.get("/", response_model=ServiceInfo, response_model_exclude_none=True,
            summary="Health check and API info")
def service_info() -> ServiceInfo:
    if settings.WEBRING_MOCK_MODE:
        return ServiceInfo(name=f"{SERVICE_NAME} (Test Mode)", version=SERVICE_VERSION,
                           mode="mock", endpoints=ENDPOINTS)
    return ServiceInfo(name=SERVICE_NAME, version=SERVICE_VERSION, endpoints=ENDPOINTS)
