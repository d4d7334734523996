from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from webring.api.info import ENDPOINTS, router as info_router
from webring.api.pictures import router as pictures_router
from webring.api.webring import router as webring_router
from webring.config.settings import settings
from webring.core.exceptions.exceptions import DomainError
from webring.services.ring_cache import close_ring_cache
from webring.utils.log import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    app_logger.info("server.started", port=settings.PORT, mock_mode=settings.WEBRING_MOCK_MODE,
                    endpoints=sorted(ENDPOINTS))
    yield
    # Shutdown logic
    close_ring_cache()
    app_logger.info("server.shutdown")


def create_app() -> FastAPI:
    app = FastAPI(title="Lemonade Stand Anarchy WebRing API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    # include routes
    app.include_router(info_router)
    app.include_router(webring_router)
    app.include_router(pictures_router)

    # every error body is {"error": "<message>"}
    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)},
                            headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request parameters"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        app_logger.error("api.error", path=request.url.path, exc_type=type(exc).__name__, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


app = create_app()


def run():
    uvicorn.run("webring.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
