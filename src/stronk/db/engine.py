"""Database engine setup and initialization."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite
import structlog

logger = structlog.get_logger(__name__)

# Largest value an SQLite INTEGER column holds
SQLITE_MAX_INT = 2**63 - 1


async def _create_schema(db: aiosqlite.Connection) -> None:
    """Create any tables and indexes that don't exist yet."""
    # Every performed set
    await db.execute("""
        CREATE TABLE IF NOT EXISTS lifts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            exercise TEXT NOT NULL,
            set_type TEXT NOT NULL,
            set_number INTEGER NOT NULL,
            reps INTEGER NOT NULL,
            weight TEXT NOT NULL,
            day_number INTEGER NOT NULL,
            week_number INTEGER NOT NULL,
            iteration_number INTEGER NOT NULL,
            lift_note TEXT,
            to_failure INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    # Training maxes; the latest row per exercise is current
    await db.execute("""
        CREATE TABLE IF NOT EXISTS training_maxes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            exercise TEXT NOT NULL,
            training_max_weight TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    # Smallest weight increment; the latest row is current
    await db.execute("""
        CREATE TABLE IF NOT EXISTS smallest_denom (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            smallest_denom TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    # Optional weeks the lifter chose to skip
    await db.execute("""
        CREATE TABLE IF NOT EXISTS skipped_weeks (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            week_number INTEGER NOT NULL,
            iteration_number INTEGER NOT NULL,
            note TEXT NOT NULL DEFAULT '',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    await db.commit()


async def _create_indexes(db: aiosqlite.Connection) -> None:
    """Create indexes; runs after migrations so every column exists."""
    await db.execute("""
        CREATE INDEX IF NOT EXISTS idx_lifts_position
        ON lifts(iteration_number, week_number, day_number)
    """)
    await db.execute("""
        CREATE INDEX IF NOT EXISTS idx_lifts_exercise_failure
        ON lifts(exercise, to_failure)
    """)
    await db.execute("""
        CREATE INDEX IF NOT EXISTS idx_training_maxes_exercise
        ON training_maxes(exercise)
    """)

    await db.commit()


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Run database migrations for schema updates."""
    cursor = await db.execute("PRAGMA table_info(lifts)")
    columns = await cursor.fetchall()
    lift_columns = {col[1] for col in columns}

    # Databases from before to-failure tracking
    if "to_failure" not in lift_columns:
        logger.info("migrating_database", table="lifts", column="to_failure")
        await db.execute("ALTER TABLE lifts ADD COLUMN to_failure INTEGER NOT NULL DEFAULT 0")

    await db.commit()


class Database:
    """The single SQLite connection every repository shares.

    All access goes through `transaction()`, which holds one lock for the
    whole logical read-then-write sequence, so at most one storage
    transaction is ever in flight.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    async def connect(self) -> "Database":
        """Open the connection and bring the schema up to date."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = await aiosqlite.connect(self.db_path)
        self._conn.row_factory = aiosqlite.Row

        await _create_schema(self._conn)
        await _run_migrations(self._conn)
        await _create_indexes(self._conn)
        logger.info("database_opened", path=str(self.db_path))
        return self

    async def close(self) -> None:
        """Close the connection."""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

    async def __aenter__(self) -> "Database":
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Run a block as one transaction, committing only if it succeeds."""
        if self._conn is None:
            raise RuntimeError("database is not connected")

        async with self._lock:
            try:
                yield self._conn
            except BaseException:
                await self._conn.rollback()
                raise
            await self._conn.commit()


async def init_db(db_path: Path) -> None:
    """Create the database file and schema."""
    async with Database(db_path):
        pass
