import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

from vocab_app.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine for the given URL."""
    return create_async_engine(database_url, echo=False, future=True, **kwargs)


def build_session_maker(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# Async engine for SQLite
async_engine = build_engine(settings.DATABASE_URL)

# Async session factory
async_session_maker = build_session_maker(async_engine)


def _ensure_sqlite_directory(engine: AsyncEngine) -> None:
    """SQLite will not create missing parent directories for its file."""
    url = make_url(str(engine.url))
    if not url.drivername.startswith("sqlite") or not url.database or url.database == ":memory:":
        return
    parent = Path(url.database).parent
    if not parent.exists():
        logger.info("Creating database directory %s", parent)
        parent.mkdir(parents=True, exist_ok=True)


async def init_db(engine: AsyncEngine = async_engine):
    """Create all tables in the database."""
    from vocab_app.models.user import User  # noqa: F401
    from vocab_app.models.word import Word  # noqa: F401

    _ensure_sqlite_directory(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ready at %s", engine.url.render_as_string(hide_password=True))


async def get_session() -> AsyncSession:
    """Dependency for getting async database session."""
    async with async_session_maker() as session:
        yield session

