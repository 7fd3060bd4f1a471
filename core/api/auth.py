#!/usr/bin/env python3
"""
Authentication endpoints: login, register, logout, current user.

Login and logout are the only places besides the refresh protocol that
change the session, and they do it through SessionManager.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.api.client import ApiClient
from core.api.session import Session
from core.exceptions import ValidationError
from core.matcher import Skill

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model_cls: Type[ModelT], **data: Any) -> ModelT:
    """Build a request model, raising core ValidationError before anything is sent."""
    try:
        return model_cls(**data)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ValidationError(f"Invalid {model_cls.__name__}: {fields}") from e


def parse_skills_input(raw: str) -> List[str]:
    """'React, SQL, ,Docker' -> ['React', 'SQL', 'Docker']"""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


class LoginRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    job_title: str = Field(min_length=1)
    skills: List[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value):
        if isinstance(value, str):
            return parse_skills_input(value)
        return [s.strip() for s in value if s and s.strip()]


class UserProfile(BaseModel):
    """Current user as returned by the auth endpoints."""
    model_config = ConfigDict(extra="ignore")

    id: Union[int, str]
    email: str
    username: Optional[str] = None
    name: Optional[str] = None
    job_title: Optional[str] = None
    skills: List[Skill] = Field(default_factory=list)

    @property
    def skill_names(self) -> List[str]:
        return [skill.name for skill in self.skills]


def _parse_user(payload: Any) -> UserProfile:
    try:
        return UserProfile.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(f"Malformed user payload: {e.error_count()} error(s)") from e


class AuthApi:
    """Wrapper around the /auth endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    @property
    def session(self) -> Session:
        return self.client.session_manager.get()

    async def login(self, email: str, password: str) -> UserProfile:
        """
        Log in and install the returned token pair as the session.

        Raises:
            ValidationError: Missing email or password (nothing is sent).
            AuthError: Credentials rejected.
        """
        request = validate_payload(LoginRequest, email=email, password=password)
        payload = await self.client.post(
            "/auth/login",
            json=request.model_dump(),
            authenticated=False,
        )

        if not isinstance(payload, dict) or not payload.get("access_token"):
            raise ValidationError("Login response did not contain an access token")

        self.client.session_manager.set(Session(
            access_token=payload["access_token"],
            refresh_token=payload.get("refresh_token"),
        ))
        logger.info(f"Logged in as {request.email}")
        return _parse_user(payload.get("user") or {"id": "", "email": request.email})

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        job_title: str,
        skills: Union[str, List[str]] = ()
    ) -> Dict[str, Any]:
        """
        Create an account. The caller logs in afterwards.

        Raises:
            ValidationError: A required field is missing (nothing is sent).
        """
        request = validate_payload(
            RegisterRequest,
            username=username,
            email=email,
            password=password,
            job_title=job_title,
            skills=skills if isinstance(skills, str) else list(skills),
        )
        payload = await self.client.post(
            "/auth/register",
            json=request.model_dump(),
            authenticated=False,
        )
        logger.info(f"Registered account {request.email}")
        return payload or {}

    async def logout(self) -> None:
        """Invalidate the session upstream; the local session is cleared regardless."""
        try:
            if self.session.is_authenticated:
                await self.client.post("/auth/logout", json={})
        finally:
            self.client.session_manager.clear()
            logger.info("Logged out")

    async def current_user(self) -> UserProfile:
        payload = await self.client.get("/auth/me")
        return _parse_user(payload)
