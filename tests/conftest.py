"""Shared fixtures for the Habit Tracker tests.

Every test gets its own ``HabitStore`` driven by a fixed clock, and
API tests talk to a fresh application through ``httpx`` without
opening a socket.
"""

from datetime import datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from habit_tracker_api.app.main import create_app
from habit_tracker_api.app.services.habit_store import HabitStore

NOW = datetime(2025, 9, 1, 9, 30)


class FixedClock:
    """Callable clock whose time only moves when a test says so."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store(clock):
    return HabitStore(clock=clock)


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
async def client(app):
    """Create async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
