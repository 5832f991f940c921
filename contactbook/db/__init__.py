"""Database layer — SQLite with ACID transactions and repository pattern."""

from contactbook.db.database import Database

__all__ = ["Database"]
