"""Schemas for the GitHub OAuth exchange."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class GitHubToken(BaseModel):
    access_token: Optional[str] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class GitHubUser(BaseModel):
    id: int
    login: str
    name: Optional[str] = None

    model_config = ConfigDict(extra="ignore")
