# shared/db.py
import logging
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from shared.config import DatabaseConfig

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker] = None


def init_db(config: DatabaseConfig) -> AsyncEngine:
    """Create the process-wide engine and session factory.

    Called once at startup. The pool never grows past ``config.pool_size``;
    requests beyond that wait for a free connection.
    """
    global _engine, _sessionmaker

    if _engine is not None:
        return _engine

    _engine = create_async_engine(
        config.url,
        pool_size=config.pool_size,
        max_overflow=0,
        pool_pre_ping=True,
        echo=config.echo,
    )
    _sessionmaker = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info("Database pool created for %s:%s/%s", config.host, config.port, config.name)
    return _engine


async def close_db() -> None:
    global _engine, _sessionmaker

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _sessionmaker = None
        logger.info("Database pool closed")


async def get_db() -> AsyncIterator[AsyncSession]:
    if _sessionmaker is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    async with _sessionmaker() as session:
        yield session
