"""Contact store — facade over the address and person repositories.

One ``ContactStore`` owns one database connection.  Construct it explicitly
(``ContactStore.open()``) and hand it to whatever needs persistence.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from contactbook.config import StoreConfig, get_store_config
from contactbook.db.address_repo import AddressRepository
from contactbook.db.database import Database
from contactbook.db.person_repo import PersonRepository
from contactbook.models.address import Address
from contactbook.models.person import Person

logger = logging.getLogger(__name__)


class ContactStore:
    """CRUD access to people and their addresses."""

    def __init__(self, db: Database):
        self._db = db
        self.addresses = AddressRepository(db)
        self.persons = PersonRepository(db, self.addresses)

    @classmethod
    def open(
        cls,
        path: Optional[Path | str] = None,
        config: Optional[StoreConfig] = None,
    ) -> "ContactStore":
        """Connect to the database file and make sure both tables exist."""
        if config is None:
            config = get_store_config()
        db = Database(path=path or config.db_path, foreign_keys=config.foreign_keys)
        try:
            db.init()
        except Exception:
            db.close()
            raise
        logger.info(f"Contact store opened at {db.path}")
        return cls(db)

    @property
    def db(self) -> Database:
        return self._db

    def close(self) -> None:
        self._db.close()

    def __enter__(self) -> "ContactStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def reset_schema(self) -> None:
        """Drop and recreate both tables."""
        self._db.reset()

    # -- Address ---------------------------------------------------------------

    def insert_address(self, address: Address) -> int:
        return self.addresses.insert(address)

    def get_address_by_id(self, address_id: int) -> Address:
        return self.addresses.get_by_id(address_id)

    def get_addresses(self) -> list[Address]:
        return self.addresses.list_all()

    def update_address(self, address: Address) -> None:
        self.addresses.update(address)

    def delete_address(self, address_id: int) -> None:
        self.addresses.delete(address_id)

    # -- Person ----------------------------------------------------------------

    def insert_person(self, person: Person) -> int:
        return self.persons.insert(person)

    def get_person_by_id(self, person_id: int) -> Person:
        return self.persons.get_by_id(person_id)
