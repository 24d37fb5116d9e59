from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


def _get_engine_kwargs(url: str, echo: bool) -> dict:
    """Return dialect-specific engine options for SQLite vs everything else.

    Only an in-memory SQLite database shares one connection (it would not
    exist otherwise); file and server databases get a pool so that every
    session has its own connection and transaction.
    """
    kwargs = {"echo": echo}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    return kwargs


class Base(DeclarativeBase):
    pass


class Database:
    """Engine and session factory for one store, held on ``app.state``."""

    def __init__(self, url: str, echo: bool = False):
        self.engine = create_async_engine(url, **_get_engine_kwargs(url, echo))
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def init(self) -> None:
        # Register tables on Base.metadata before creating them.
        import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request):
    database: Database = request.app.state.database
    async with database.sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
