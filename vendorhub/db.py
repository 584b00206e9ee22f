import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from vendorhub.core.config import settings
from vendorhub.models.base import Base

log = logging.getLogger(__name__)


def _engine_kwargs() -> dict:
    kwargs = {"echo": settings.db_echo}
    if not settings.is_sqlite:
        # Bounded pool; sqlite drivers manage their own connections
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
        )
    return kwargs


engine = create_async_engine(settings.database_url, **_engine_kwargs())

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# Dependency: one session (and one transaction) per request
async def get_db():
    async with async_session() as session:
        yield session


async def create_db_and_tables():
    import vendorhub.models  # noqa: F401  registers every model on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("Database schema ensured")
