import tempfile
from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlmodel import Session

from foodcart.core.config import Settings
from foodcart.main import create_app, prepare_store


@pytest.fixture
def settings() -> Iterator[Settings]:
    # Use a fresh SQLite DB file in a temp dir per test for isolation
    tmp = tempfile.TemporaryDirectory()
    db_path = Path(tmp.name) / "test.db"
    try:
        yield Settings(database_url=f"sqlite:///{db_path.as_posix()}", seed_on_startup=True)
    finally:
        tmp.cleanup()


@pytest.fixture
def test_app(settings: Settings) -> Iterator[FastAPI]:
    app = create_app(settings)
    # ASGITransport does not run the lifespan, so set the store up by hand
    prepare_store(app)
    try:
        yield app
    finally:
        app.state.engine.dispose()


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def db_session(test_app: FastAPI) -> Iterator[Session]:
    with Session(test_app.state.engine) as session:
        yield session
