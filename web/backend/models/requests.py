#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Union


class LoginBody(BaseModel):
    """Credentials for logging in."""
    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Account password")


class RegisterBody(BaseModel):
    """New account details."""
    username: str
    email: str
    password: str
    job_title: str = Field(..., description="Current or target job title")
    skills: Union[str, List[str]] = Field(
        default_factory=list,
        description="Skill names, as a list or a comma-separated string"
    )


class SearchBody(BaseModel):
    """Skill-gap search."""
    job_title: str = Field(..., description="Job title to search for")
    skills: List[str] = Field(
        default_factory=list,
        description="Candidate skills; replaces the session's skill list"
    )


class CreateSkillBody(BaseModel):
    """Request to add a skill to the catalog."""
    skill_name: str = Field(..., description="Skill name")
