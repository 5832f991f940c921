"""Repository for the ``person`` table."""

from __future__ import annotations

import logging

from contactbook.db.address_repo import AddressRepository
from contactbook.db.database import Database
from contactbook.errors import NoIdError, NotFoundError
from contactbook.models.person import Person

logger = logging.getLogger(__name__)


class PersonRepository:
    """Persists people together with their embedded address."""

    def __init__(self, db: Database, addresses: AddressRepository):
        self._db = db
        self._addresses = addresses

    def insert(self, person: Person) -> int:
        """
        Insert ``person`` and write the generated id back onto it.

        An embedded address is inserted when it has no id yet and updated
        otherwise.  Both rows are written in one transaction; on failure the
        embedded address gets its previous id back.
        """
        previous_address_id = person.address.id if person.address is not None else None
        try:
            with self._db.transaction() as conn:
                address_id = None
                if person.address is not None:
                    if person.address.is_persisted:
                        self._addresses.update(person.address)
                    else:
                        self._addresses.insert(person.address)
                    address_id = person.address.id

                cur = conn.execute(
                    """INSERT INTO person (first_name, last_name, mobile, address)
                       VALUES (?, ?, ?, ?)""",
                    (person.first_name, person.last_name, person.mobile, address_id),
                )
                if cur.lastrowid is None:
                    raise NoIdError("person")
        except Exception:
            if person.address is not None:
                person.address.id = previous_address_id  # type: ignore[assignment]
            raise
        person.id = cur.lastrowid
        person.address_id = address_id
        logger.info(f"Inserted person {person.id}: {person.first_name} {person.last_name}")
        return person.id

    def get_by_id(self, person_id: int) -> Person:
        """Load a person and resolve its address reference, if any."""
        logger.debug(f"Looking up person {person_id}")
        row = self._db.fetchone(
            "SELECT id, first_name, last_name, mobile, address FROM person WHERE id = ?",
            (person_id,),
        )
        if row is None:
            raise NotFoundError("person", person_id)
        address = None
        if row["address"] is not None:
            address = self._addresses.get_by_id(row["address"])
        return Person.from_row(row, address=address)
