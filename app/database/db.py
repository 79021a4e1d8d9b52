import logging

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def create_db_engine(settings: Settings) -> AsyncEngine:
    """
    Build the async engine that owns the connection pool.

    The pool is bounded by DB_POOL_SIZE + DB_MAX_OVERFLOW; a request that
    cannot get a connection within DB_POOL_TIMEOUT seconds fails with
    sqlalchemy.exc.TimeoutError.
    """
    url = make_url(settings.database_url)
    options = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    logger.info(f"🔌 Creating engine for {url.render_as_string(hide_password=True)}")
    return create_async_engine(url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def init_models(engine: AsyncEngine) -> None:
    """Create the tables that do not exist yet"""
    # register the mapped classes on Base.metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_connection(engine: AsyncEngine) -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"❌ Error connecting to database: {e}")
        return False
    logger.info("✅ Connected to database")
    return True
