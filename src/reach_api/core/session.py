"""Placeholder login session.

Accepts any non-empty username, password and team ID without contacting a
server. The manager is an explicit object owned by the application (see
``main.create_app``) and passed to whatever needs it; the aggregation
library never consults it.
"""

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime

from loguru import logger


@dataclass(frozen=True)
class SessionUser:
    """The logged-in field worker."""

    username: str
    team_id: str
    login_date: datetime
    id: uuid.UUID = field(default_factory=uuid.uuid4)


class SessionManager:
    """Holds the single foreground login session."""

    def __init__(self) -> None:
        self._current_user: SessionUser | None = None

    @property
    def current_user(self) -> SessionUser | None:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def login(self, username: str, password: str, team_id: str, *, now: datetime | None = None) -> bool:
        """Start a session if all credentials are non-empty.

        Credentials are never validated against anything. A rejected login
        leaves any existing session untouched.

        Args:
            username: User name.
            password: Password (only checked for presence).
            team_id: Team identifier.
            now: Login instant, defaults to the current UTC time.

        Returns:
            True if the session was started.
        """
        if not username or not password or not team_id:
            logger.info("Login rejected: username, password and team ID are required")
            return False

        self._current_user = SessionUser(
            username=username,
            team_id=team_id,
            login_date=now if now is not None else datetime.now(UTC),
        )
        logger.info(f"User {username} logged in to team {team_id}")
        return True

    def logout(self) -> None:
        if self._current_user is not None:
            logger.info(f"User {self._current_user.username} logged out")
        self._current_user = None
