#!/usr/bin/env python3
"""
Jobly API - FastAPI Application

REST backend for jobs and companies.

Usage:
    python web/app.py

Then open:
    - http://localhost:3001/docs - API Documentation (Swagger UI)
    - http://localhost:3001/redoc - Alternative API Documentation
"""

import logging
from typing import Optional

from fastapi import FastAPI

from database.database import DatabaseManager
from .config import get_config
from .exceptions import register_exception_handlers
from .routers import jobs_router, companies_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(db_manager: Optional[DatabaseManager] = None) -> FastAPI:
    """
    Build the application around a store.

    Args:
        db_manager: Store to serve from; built from the configured database
            URL when omitted.
    """
    config = get_config()
    if db_manager is None:
        db_manager = DatabaseManager(config.database.url, echo=config.database.echo)

    app = FastAPI(
        title="Jobly API",
        description="API for jobs and the companies offering them",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.db_manager = db_manager

    register_exception_handlers(app)

    app.include_router(jobs_router)
    app.include_router(companies_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "jobly-api"}

    return app


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Jobly API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:create_app",
        factory=True,
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
