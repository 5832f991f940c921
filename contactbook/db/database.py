"""Core database connection with ACID transaction support."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

from contactbook.db.schema import DROP_DDL, SCHEMA_DDL

logger = logging.getLogger(__name__)


class Database:
    """
    SQLite database wrapper with explicit ACID transaction support.

    Implements the Unit-of-Work pattern: every mutation goes through
    ``transaction()``, which commits on success and rolls back on failure.
    Nested ``transaction()`` blocks join the outermost one.
    """

    def __init__(self, path: Optional[Path | str] = None, foreign_keys: bool = False):
        from contactbook.config import get_db_path
        if path is None:
            self.path: Path = get_db_path()
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self.foreign_keys = foreign_keys
        self._conn: Optional[sqlite3.Connection] = None
        self._depth = 0

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._ensure_dir()
            logger.debug(f"Opening database {self.path}")
            self._conn = sqlite3.connect(str(self.path))
            self._conn.row_factory = sqlite3.Row
            self._conn.execute(f"PRAGMA foreign_keys = {'ON' if self.foreign_keys else 'OFF'}")
            self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None
            logger.debug(f"Closed database {self.path}")

    def init(self) -> None:
        """Create all tables (idempotent)."""
        conn = self.connection()
        conn.executescript(SCHEMA_DDL)
        conn.commit()

    def reset(self) -> None:
        """Drop all tables and recreate them empty.

        Not allowed inside ``transaction()``: the DDL script commits on its own.
        """
        if self._depth:
            raise RuntimeError("reset() cannot run inside an open transaction")
        conn = self.connection()
        conn.executescript(DROP_DDL)
        conn.commit()
        logger.info(f"Dropped all tables in {self.path}")
        self.init()

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """ACID transaction: commits on success, rolls back on exception."""
        conn = self.connection()
        self._depth += 1
        outermost = self._depth == 1
        try:
            yield conn
            if outermost:
                conn.commit()
        except BaseException:
            if outermost:
                conn.rollback()
                logger.warning("Transaction rolled back")
            raise
        finally:
            self._depth -= 1

    # -- low-level query helpers -----------------------------------------------

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        row = self.connection().execute(sql, params).fetchone()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        rows = self.connection().execute(sql, params).fetchall()
        return [dict(r) for r in rows]
