from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.clock import FrozenClock
from src.adapters.tz_database import TimezoneDatabase, get_timezone_database
from src.api.deps import Settings, get_clock
from src.api.main import create_app

# 2026-01-05 10:30 UTC: northern-hemisphere winter, no DST in New York
FROZEN_UTC = datetime(2026, 1, 5, 10, 30, 0, tzinfo=UTC)


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(FROZEN_UTC)


@pytest.fixture
def tz_db() -> TimezoneDatabase:
    return get_timezone_database()


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    """Default settings, isolated from any settings.yaml in the working directory."""
    monkeypatch.chdir(tmp_path)
    return Settings(environ={})


@pytest.fixture
def app(settings: Settings, frozen_clock: FrozenClock) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_clock] = lambda: frozen_clock
    return app


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client; entering the context runs the lifespan handler."""
    with TestClient(app) as test_client:
        yield test_client
