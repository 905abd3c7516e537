"""Placeholder login endpoints. No credentials are verified."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from reach_api.core.dependencies import get_session_manager
from reach_api.core.session import SessionManager
from reach_api.schemas.session import LoginRequest, SessionStatusResponse, SessionUserResponse

session_router = APIRouter(prefix="/session", tags=["session"])


def _status(manager: SessionManager) -> SessionStatusResponse:
    user = manager.current_user
    return SessionStatusResponse(
        is_authenticated=manager.is_authenticated,
        user=SessionUserResponse.model_validate(user) if user is not None else None,
    )


@session_router.get("")
async def session_status(
    manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> SessionStatusResponse:
    """Return whether someone is logged in."""
    return _status(manager)


@session_router.post("/login")
async def login(
    body: LoginRequest,
    manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> SessionStatusResponse:
    """Start a session. Any non-empty username, password and team ID are accepted."""
    if not manager.login(body.username, body.password, body.team_id):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Username, password, and team ID are required",
        )
    return _status(manager)


@session_router.post("/logout")
async def logout(
    manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> SessionStatusResponse:
    """End the current session."""
    manager.logout()
    return _status(manager)
