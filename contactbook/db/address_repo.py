"""Repository for the ``address`` table — full CRUD with ACID transactions."""

from __future__ import annotations

import logging

from contactbook.db.database import Database
from contactbook.errors import NoIdError, NotFoundError
from contactbook.models.address import Address

logger = logging.getLogger(__name__)


class AddressRepository:
    """Single-Responsibility repository for address persistence."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def insert(self, address: Address) -> int:
        """Insert a new row and write the generated id back onto ``address``."""
        with self._db.transaction() as conn:
            cur = conn.execute(
                "INSERT INTO address (street, zip, city, phone) VALUES (?, ?, ?, ?)",
                (address.street, address.zip, address.city, address.phone),
            )
            if cur.lastrowid is None:
                raise NoIdError("address")
            address.id = cur.lastrowid
        logger.info(f"Inserted address {address.id}: {address.street}, {address.city}")
        return address.id

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, address_id: int) -> Address:
        logger.debug(f"Looking up address {address_id}")
        row = self._db.fetchone(
            "SELECT id, street, zip, city, phone FROM address WHERE id = ?", (address_id,)
        )
        if row is None:
            raise NotFoundError("address", address_id)
        return Address.from_row(row)

    def list_all(self) -> list[Address]:
        rows = self._db.fetchall(
            "SELECT id, street, zip, city, phone FROM address ORDER BY id"
        )
        return [Address.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def update(self, address: Address) -> None:
        """Overwrite every column of the row with ``address.id``.

        A missing row is not an error.
        """
        with self._db.transaction() as conn:
            cur = conn.execute(
                "UPDATE address SET street = ?, zip = ?, city = ?, phone = ? WHERE id = ?",
                (address.street, address.zip, address.city, address.phone, address.id),
            )
        logger.info(f"Updated address {address.id} ({cur.rowcount} row(s))")

    # -- Delete ----------------------------------------------------------------

    def delete(self, address_id: int) -> None:
        with self._db.transaction() as conn:
            cur = conn.execute("DELETE FROM address WHERE id = ?", (address_id,))
        logger.info(f"Deleted address {address_id} ({cur.rowcount} row(s))")
