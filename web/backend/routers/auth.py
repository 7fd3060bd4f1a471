#!/usr/bin/env python3
"""
Auth endpoints - login, registration, logout and current user.
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.api import AuthApi
from core.skill_gap_service import SkillGapService
from ..config import get_config
from ..dependencies import get_auth_api, get_skill_gap_service
from ..models.requests import LoginBody, RegisterBody
from ..models.responses import MessageResponse, SkillItem, UserResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": f"Too many login attempts: {exc.detail}",
            "type": "RateLimitExceeded"
        }
    )


def _login_rate_limit() -> str:
    return get_config().web.login_rate_limit


def _user_response(user) -> UserResponse:
    return UserResponse(
        success=True,
        user_id=user.id,
        email=user.email,
        username=user.username,
        job_title=user.job_title,
        skills=[SkillItem(skill_id=s.id, skill_name=s.name) for s in user.skills],
    )


@router.post("/login", response_model=UserResponse)
@limiter.limit(_login_rate_limit)
async def login(
    request: Request,
    body: LoginBody,
    auth: AuthApi = Depends(get_auth_api),
    service: SkillGapService = Depends(get_skill_gap_service)
):
    """
    Log in against the job catalog and start a session.

    The profile's skills become the candidate skill list.
    """
    user = await auth.login(body.email, body.password)
    if user.skills:
        service.set_candidate_skills(user.skill_names)
    return _user_response(user)


@router.post("/register", response_model=MessageResponse)
async def register(body: RegisterBody, auth: AuthApi = Depends(get_auth_api)):
    """Create an account. Log in afterwards."""
    await auth.register(
        username=body.username,
        email=body.email,
        password=body.password,
        job_title=body.job_title,
        skills=body.skills,
    )
    return MessageResponse(success=True, message="Registration successful. Please log in.")


@router.post("/logout", response_model=MessageResponse)
async def logout(auth: AuthApi = Depends(get_auth_api)):
    await auth.logout()
    return MessageResponse(success=True, message="Logged out")


@router.get("/me", response_model=UserResponse)
async def me(auth: AuthApi = Depends(get_auth_api)):
    """Current user profile."""
    return _user_response(await auth.current_user())
