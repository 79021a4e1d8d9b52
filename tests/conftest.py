import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.database.db import create_db_engine, create_session_factory, init_models
from app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'books.db'}",
        RATE_LIMIT="1000/minute",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the client runs the lifespan, which builds the pool and tables
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def engine(settings):
    engine = create_db_engine(settings)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine):
    async with create_session_factory(engine)() as session:
        yield session
