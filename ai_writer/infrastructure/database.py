"""Local key/value persistence for the AI Writer."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import delete, select

from ai_writer.infrastructure.config import ApplicationConfig

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class KeyValueEntry(Base):
    """A serialized value stored under a fixed key."""

    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    def __repr__(self):
        return f"<KeyValueEntry(key={self.key})>"


def async_database_url(database_url: str) -> str:
    """Convert a SQLite URL for async support."""
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return database_url


class Database:
    """Database manager with async support."""

    def __init__(self, database_url: str):
        self.database_url = async_database_url(database_url)
        self.engine = create_async_engine(
            self.database_url,
            echo=False,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init_tables(self) -> None:
        """Initialize database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()

    def get_session(self) -> AsyncSession:
        """Get database session."""
        return self.session_factory()

    async def get_value(self, key: str) -> Optional[str]:
        """Read the value stored under a key."""
        async with self.get_session() as session:
            result = await session.execute(
                select(KeyValueEntry.value).where(KeyValueEntry.key == key)
            )
            return result.scalar_one_or_none()

    async def set_value(self, key: str, value: str) -> None:
        """Create or replace the value stored under a key."""
        async with self.get_session() as session:
            entry = await session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            await session.commit()

    async def delete_value(self, key: str) -> None:
        """Remove a key entirely."""
        async with self.get_session() as session:
            await session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
            await session.commit()


async def init_database(config: ApplicationConfig) -> Database:
    """Initialize database with configuration."""
    db = Database(config.database_url)
    await db.init_tables()
    return db
