"""contactbook — people and their addresses in an embedded SQLite file."""

from contactbook.errors import ContactBookError, InvalidDataError, NoIdError, NotFoundError
from contactbook.models import Address, Person, UNASSIGNED_ID
from contactbook.store import ContactStore

__all__ = [
    "ContactStore",
    "Address", "Person", "UNASSIGNED_ID",
    "ContactBookError", "InvalidDataError", "NoIdError", "NotFoundError",
]
