from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from core.config import settings
from core.logging_config import setup_logging

# Feature routes
from features.stations.routes.station_routes import router as station_router
from features.tides.routes.tide_routes import router as tide_router

# Services and clients
from features.common.exceptions.query_exceptions import (
    QueryValidationError,
    UpstreamFetchError,
    UpstreamTimeoutError
)
from features.common.services.noaa_client import NOAAClient
from features.stations.services.station_query_service import StationQueryService
from features.tides.services.tide_service import TideService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("🚀 Starting Tide Query API...")

    noaa_client = NOAAClient()
    app.state.noaa_client = noaa_client
    app.state.station_query_service = StationQueryService(noaa_client)
    app.state.tide_service = TideService(noaa_client)

    logger.info("✨ API startup complete - ready to serve requests")
    try:
        yield
    finally:
        logger.info("🔄 Shutting down API...")
        await noaa_client.close()
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title="Tide Query API",
    description="API for NOAA tide stations and tide predictions",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(QueryValidationError)
async def query_validation_error_handler(request: Request, exc: QueryValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})

@app.exception_handler(UpstreamFetchError)
async def upstream_fetch_error_handler(request: Request, exc: UpstreamFetchError):
    status_code = 504 if isinstance(exc, UpstreamTimeoutError) else 502
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})

app.include_router(station_router)
app.include_router(tide_router)

@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url=app.docs_url)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now().isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5010))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level="info",
        workers=1
    )
