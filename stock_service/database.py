# stock_service/database.py

# type: ignore[misc]
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def normalize_database_url(database_url: str) -> str:
    """Pick the async driver for URLs given in their plain form."""
    # Convert postgresql:// to postgresql+asyncpg:// for async support
    if database_url.startswith('postgresql://'):
        database_url = database_url.replace('postgresql://', 'postgresql+asyncpg://', 1)
    elif database_url.startswith('sqlite://'):
        database_url = database_url.replace('sqlite://', 'sqlite+aiosqlite://', 1)
    return database_url


def ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return
    database = url.database
    if not database or database == ":memory:":
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def create_engine_for(database_url: str) -> AsyncEngine:
    database_url = normalize_database_url(database_url)
    ensure_sqlite_directory(database_url)

    if make_url(database_url).get_backend_name() == "sqlite":
        return create_async_engine(database_url, echo=False, future=True)

    return create_async_engine(
        database_url,
        echo=False,
        future=True,
        pool_size=5,
        max_overflow=0,
        pool_timeout=30,
        pool_recycle=1800
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
