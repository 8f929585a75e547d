# app/infrastructure/database/session.py

from functools import lru_cache
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from app.config.settings import get_settings

Base = declarative_base()


@lru_cache
def get_engine() -> AsyncEngine:
    database_url = get_settings().database_url
    kwargs = {"echo": False, "pool_pre_ping": True}
    # SQLite pools do not take sizing arguments.
    if not database_url.startswith("sqlite"):
        kwargs.update(pool_size=10, max_overflow=20)
    return create_async_engine(database_url, **kwargs)


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return make_session_factory(get_engine())


async def init_models(engine: Optional[AsyncEngine] = None) -> None:
    """Create tables that do not exist yet."""
    # Import registers ORM models on Base.metadata.
    from app.infrastructure.database import models  # noqa: F401

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
