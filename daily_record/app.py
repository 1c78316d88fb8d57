"""
FastAPI Application Entry Point
Daily Record Backend API Server

Usage:
    # Development with auto-reload
    uvicorn daily_record.app:app --reload

    # Production
    uvicorn daily_record.app:app --host 127.0.0.1 --port 3000
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from daily_record import __version__
from daily_record.config.loader import get_config
from daily_record.core.errors import DailyRecordError, StoreError
from daily_record.core.logger import get_logger
from daily_record.handlers import register_fastapi_routes

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI application lifecycle management"""
    logger.info("========== Daily Record Backend Starting ==========")

    config_loader = get_config()
    logger.info(f"✓ Configuration loaded: {config_loader.config_file}")

    from daily_record.core.db import get_db

    db = get_db()
    logger.info(f"✓ Database initialized: {db.db_path}")

    logger.info("========== Daily Record Backend Ready ==========")

    yield

    logger.info("========== Daily Record Backend Shutting Down ==========")


async def handle_daily_record_error(request: Request, exc: DailyRecordError) -> JSONResponse:
    """Translate domain errors into JSON error responses"""
    if isinstance(exc, StoreError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse({"error": "Server error"}, status_code=exc.status_code)

    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=exc.status_code)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Daily Record API",
        description="Daily activity log: day grid, statistics and import/export",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DailyRecordError, handle_daily_record_error)

    register_fastapi_routes(app, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint with API information"""
        return {
            "service": "Daily Record API",
            "version": __version__,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "daily-record"}

    logger.info("✓ FastAPI application created with routes")
    return app


# Create application instance
app = create_app()


def main():
    """Run the server with host/port/debug from the [server] config section"""
    config = get_config()
    host = config.get("server.host", "127.0.0.1")
    port = int(config.get("server.port", 3000))
    debug = bool(config.get("server.debug", False))

    logger.info(f"Starting server at http://{host}:{port}")

    uvicorn.run(
        "daily_record.app:app" if debug else app,
        host=host,
        port=port,
        reload=debug,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
