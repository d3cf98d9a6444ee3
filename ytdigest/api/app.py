"""
FastAPI application for the YouTube Video Digest.
"""

import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ytdigest.config import config
from ytdigest.api.routes import router
from ytdigest.core.providers import check_api_key_availability
from ytdigest.db.database import init_db
from ytdigest.utils.logger import logging


def create_app() -> FastAPI:
    """Build the API application with its middleware and routes."""
    api = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="Summarize YouTube videos section by section and stream the progress",
    )

    api.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @api.on_event("startup")
    async def startup_event():
        """Create the summary tables and report which providers can be used."""
        init_db()
        available = [name for name, ok in check_api_key_availability().items() if ok]
        logging.info(f"Summary store ready at {config.DATABASE_URL}; configured providers: {available or 'none'}")

    @api.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Time each request; for streams this covers the time to the first byte."""
        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Process-Time"] = str(time.time() - start_time)
        return response

    @api.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logging.error(f"Unhandled error on {request.url.path}: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={"detail": f"An unexpected error occurred: {str(exc)}"},
        )

    api.include_router(router)

    @api.get("/")
    async def root():
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "endpoints": ["/api/summarize", "/api/history"],
        }

    return api


app = create_app()
