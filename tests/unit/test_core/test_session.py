"""Tests for the placeholder login session."""

from datetime import UTC, datetime

import pytest

from reach_api.core.session import SessionManager


class TestSessionManager:
    """Tests for SessionManager."""

    def test_starts_logged_out(self) -> None:
        manager = SessionManager()
        assert not manager.is_authenticated
        assert manager.current_user is None

    def test_login_accepts_any_non_empty_credentials(self) -> None:
        manager = SessionManager()
        login_date = datetime(2025, 9, 10, 8, 0, tzinfo=UTC)
        assert manager.login("maria", "anything", "team-7", now=login_date)
        assert manager.is_authenticated
        user = manager.current_user
        assert user is not None
        assert user.username == "maria"
        assert user.team_id == "team-7"
        assert user.login_date == login_date

    @pytest.mark.parametrize(
        ("username", "password", "team_id"),
        [("", "pw", "team"), ("user", "", "team"), ("user", "pw", "")],
    )
    def test_login_rejects_empty_fields(self, username: str, password: str, team_id: str) -> None:
        manager = SessionManager()
        assert not manager.login(username, password, team_id)
        assert not manager.is_authenticated

    def test_rejected_login_keeps_existing_session(self) -> None:
        manager = SessionManager()
        manager.login("maria", "pw", "team-7")
        assert not manager.login("", "", "")
        assert manager.current_user is not None
        assert manager.current_user.username == "maria"

    def test_logout_clears_user(self) -> None:
        manager = SessionManager()
        manager.login("maria", "pw", "team-7")
        manager.logout()
        assert not manager.is_authenticated
        assert manager.current_user is None

    def test_each_login_gets_new_user_id(self) -> None:
        manager = SessionManager()
        manager.login("maria", "pw", "team-7")
        first = manager.current_user
        manager.login("maria", "pw", "team-7")
        assert first is not None
        assert manager.current_user is not None
        assert manager.current_user.id != first.id
