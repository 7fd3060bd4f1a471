"""API route handlers."""

from .auth import router as auth_router
from .skills import router as skills_router
from .jobs import router as jobs_router
from .analytics import router as analytics_router
from .export import router as export_router
