#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The backend serves a single user session: one AppContext (and with it one
SessionManager) per process, built lazily on first use.
"""

from typing import Optional

from core.api import AuthApi, CatalogApi
from core.app_context import AppContext
from core.skill_gap_service import SkillGapService
from .config import get_config
from .services.analysis_service import AnalysisService


_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get (building on first call) the process-wide application context."""
    global _context
    if _context is None:
        _context = AppContext.build(get_config())
    return _context


async def close_app_context() -> None:
    global _context
    if _context is not None:
        await _context.close()
        _context = None


def get_auth_api() -> AuthApi:
    """
    FastAPI dependency for the auth endpoint wrapper.

    Usage:
        @router.post("/login")
        async def login(auth: AuthApi = Depends(get_auth_api)):
            ...
    """
    return get_app_context().auth


def get_catalog_api() -> CatalogApi:
    return get_app_context().catalog


def get_skill_gap_service() -> SkillGapService:
    return get_app_context().skill_gap_service


def get_analysis_service() -> AnalysisService:
    return AnalysisService(get_skill_gap_service())
