#!/usr/bin/env python3
"""
SkillScout Web Backend - FastAPI Application

Backend-for-frontend for skill gap analysis against the job catalog API.

Usage:
    python main.py --mode serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import sys
import logging
from contextlib import asynccontextmanager
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.exceptions import ApiError
from .config import get_config
from .dependencies import close_app_context
from .exceptions import (
    ServiceException,
    api_error_handler,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    auth_router,
    skills_router,
    jobs_router,
    analytics_router,
    export_router
)
from .routers.auth import add_rate_limit_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_app_context()


# Create FastAPI app
app = FastAPI(
    title="SkillScout API",
    description="Skill gap analysis, job recommendations and skill demand",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.web.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure rate limiting
add_rate_limit_handlers(app)

# Register exception handlers
app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(auth_router)
app.include_router(skills_router)
app.include_router(jobs_router)
app.include_router(analytics_router)
app.include_router(export_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "skillscout-web"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting SkillScout Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
