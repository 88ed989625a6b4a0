"""
Application factory and FastAPI app configuration.
"""

import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from restaurant_service.api.router import router as api_router
from restaurant_service.config import get_settings
from restaurant_service.utils import sanitize_for_json

logger = logging.getLogger("restaurant_service")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Rejected NaN/Infinity inputs are echoed back in each error's "input".
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(sanitize_for_json(exc.errors()))})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    application = FastAPI(
        title=settings.api_title,
        version="0.1.0",
        description="REST API for the restaurant SDE valuation calculator",
    )

    application.include_router(api_router)
    application.add_exception_handler(RequestValidationError, request_validation_handler)

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        method, path = request.method, request.url.path
        logger.info(f"Incoming request: {method} {path}")
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Request failed: {method} {path} Error: {e}")
            return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})
        elapsed = time.perf_counter() - started
        logger.info(f"Request completed: {method} {path} Status: {response.status_code} Time: {elapsed:.4f}s")
        return response

    @application.get("/")
    def read_root():
        return {"message": "Restaurant Valuation API is running"}

    return application


app = create_app()


def main():
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "restaurant_service.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
