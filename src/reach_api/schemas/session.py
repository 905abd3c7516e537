"""Pydantic v2 schemas for the placeholder login session."""

import uuid
from datetime import datetime

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Credentials for the placeholder login. Only presence is checked."""

    username: str
    password: str
    team_id: str


class SessionUserResponse(BaseModel):
    """The logged-in user."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    username: str
    team_id: str
    login_date: datetime


class SessionStatusResponse(BaseModel):
    """Current session state."""

    is_authenticated: bool
    user: SessionUserResponse | None = None
