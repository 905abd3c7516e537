"""Integration tests for the dashboard API endpoint."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from reach_api.api.v1.dashboard import dashboard_router
from reach_api.api.v1.session import session_router
from reach_api.core.config import Settings, get_settings
from reach_api.core.dependencies import get_async_session
from reach_api.lib.outreach import AnswerStatus, ResidenceType, ResponseType, VisitRecord
from reach_api.services.visit_service import create_visit


def _make_app(session: AsyncSession, settings: Settings) -> FastAPI:
    app = FastAPI()
    app.include_router(dashboard_router, prefix="/api/v1")
    app.include_router(session_router, prefix="/api/v1")
    app.dependency_overrides[get_async_session] = lambda: session
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
async def client(async_session: AsyncSession, settings: Settings) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=_make_app(async_session, settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def _seed(session: AsyncSession) -> None:
    now = datetime.now(UTC)
    rows = [
        (ResidenceType.HOUSE, AnswerStatus.ANSWERED, ResponseType.POSITIVE, now - timedelta(minutes=1)),
        (ResidenceType.APARTMENT, AnswerStatus.ANSWERED, ResponseType.NEGATIVE, now - timedelta(minutes=2)),
        (ResidenceType.APARTMENT, AnswerStatus.NO_ANSWER, ResponseType.POSITIVE, now - timedelta(days=3)),
        (ResidenceType.HOTEL, AnswerStatus.ANSWERED, ResponseType.POSITIVE, now - timedelta(days=90)),
    ]
    for residence_type, answer_status, response_type, timestamp in rows:
        record = VisitRecord.create(10.0, 20.0, residence_type, answer_status, response_type, timestamp=timestamp)
        await create_visit(session, record)


class TestDashboard:
    async def test_empty_store(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/dashboard")
        assert resp.status_code == 200
        data = resp.json()
        assert data["timeframe"] == "all"
        assert data["stats"] == {
            "total_visits": 0,
            "answered": 0,
            "no_answer": 0,
            "positive": 0,
            "negative": 0,
            "response_rate": 0.0,
            "positive_rate": 0.0,
        }
        assert [entry["residence_type"] for entry in data["residence_breakdown"]] == [
            "house",
            "apartment",
            "hotel",
            "duplex",
            "other",
        ]
        assert all(entry["count"] == 0 for entry in data["residence_breakdown"])
        assert data["daily_series"] == []
        assert data["user"] is None

    async def test_all_time(self, client: AsyncClient, async_session: AsyncSession) -> None:
        await _seed(async_session)
        data = (await client.get("/api/v1/dashboard", params={"timeframe": "all"})).json()
        stats = data["stats"]
        assert stats["total_visits"] == 4
        assert stats["answered"] == 3
        assert stats["no_answer"] == 1
        assert stats["positive"] == 2
        assert stats["negative"] == 1
        assert stats["response_rate"] == pytest.approx(0.75)
        assert stats["positive_rate"] == pytest.approx(2 / 3)

        breakdown = {entry["residence_type"]: entry for entry in data["residence_breakdown"]}
        assert breakdown["apartment"]["count"] == 2
        assert breakdown["hotel"]["label"] == "Hotel Housing"
        assert sum(entry["count"] for entry in data["daily_series"]) == 4

    async def test_week_excludes_older_visits(self, client: AsyncClient, async_session: AsyncSession) -> None:
        await _seed(async_session)
        data = (await client.get("/api/v1/dashboard", params={"timeframe": "week"})).json()
        assert data["timeframe"] == "week"
        assert data["stats"]["total_visits"] == 3
        assert data["stats"]["no_answer"] == 1

    async def test_invalid_timeframe_returns_422(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/dashboard", params={"timeframe": "decade"})
        assert resp.status_code == 422

    async def test_includes_logged_in_user(self, client: AsyncClient) -> None:
        await client.post(
            "/api/v1/session/login",
            json={"username": "alex", "password": "pw", "team_id": "team-7"},
        )
        data = (await client.get("/api/v1/dashboard")).json()
        assert data["user"]["username"] == "alex"
