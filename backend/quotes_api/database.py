"""
Quotes API - Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, FastAPI session dependency,
       and startup helpers that create and seed the `quotes` table.
How:   One engine per process. Each request gets its own session that
       commits on success and rolls back on error.

Connection pooling:
    SQLite (the default) opens a fresh aiosqlite connection per session
    (NullPool). Server databases such as PostgreSQL use a queue pool sized
    from settings (db_pool_size, db_max_overflow, db_pool_pre_ping).
"""

import json
import logging
from pathlib import Path
from typing import Any, AsyncGenerator

from sqlalchemy import func, insert, pool, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from quotes_api.config import settings

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Unknown"


def _engine_options() -> dict[str, Any]:
    """Pool options for the configured backend."""
    if settings.is_sqlite:
        return {"poolclass": pool.NullPool}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": settings.db_pool_pre_ping,
        "pool_recycle": 3600,
    }


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.database_url,
    # Echo SQL only in DEBUG; it is very noisy otherwise
    echo=settings.log_level == "DEBUG",
    **_engine_options(),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, outside
# the session context
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shares one metadata)."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session

    Example usage in a route:
        @router.get("/quotes")
        async def list_quotes(db: AsyncSession = Depends(get_db_session)):
            return await quote_service.list_quotes(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Schema & Seed ─────────────────────────────────────────────────────────
def load_seed_quotes(path: str) -> list[dict[str, str]]:
    """
    Read seed quotes from a JSON array of {"text", "author"} objects.

    Entries without text are skipped; a missing or empty author becomes
    "Unknown".
    """
    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh)

    quotes = []
    for entry in raw:
        text = entry.get("text")
        if not text:
            continue
        quotes.append({"text": text, "author": entry.get("author") or DEFAULT_AUTHOR})
    return quotes


async def init_database(seed: bool | None = None) -> int:
    """
    Create the quotes table if needed and seed it when empty.

    What:    Idempotent startup initialization.
    When:    Called from the application lifespan before serving requests.
    How:     CREATE TABLE IF NOT EXISTS via metadata.create_all, then a
             COUNT(*) probe. Seed rows are inserted in batches of
             settings.seed_batch_size inside a single transaction.

    Args:
        seed: Override settings.seed_on_startup.

    Returns:
        Number of quotes inserted (0 when seeding was skipped).
    """
    # Register models on Base.metadata
    from quotes_api.models.quote import Quote

    if seed is None:
        seed = settings.seed_on_startup

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        if not seed:
            return 0

        seed_path = Path(settings.seed_file)
        if not seed_path.is_file():
            logger.warning("Seed file %s not found, skipping seed.", seed_path)
            return 0

        async with async_session_factory() as session:
            result = await session.execute(select(func.count(Quote.id)))
            count = result.scalar() or 0
            if count:
                logger.info("Database already contains %d quotes, skipping seed.", count)
                return 0

            quotes = load_seed_quotes(str(seed_path))
            if not quotes:
                return 0

            logger.info("Seeding database with %d initial quotes...", len(quotes))
            batch_size = settings.seed_batch_size
            for start in range(0, len(quotes), batch_size):
                batch = quotes[start:start + batch_size]
                await session.execute(insert(Quote).values(batch))
            await session.commit()

        logger.info("Seeded %d quotes.", len(quotes))
        return len(quotes)

    except SQLAlchemyError as e:
        logger.error("Database initialization failed: %s", str(e))
        raise


async def dispose_engine() -> None:
    """Closes all pooled connections. Called on application shutdown."""
    await engine.dispose()
