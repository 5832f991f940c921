"""Error kinds raised by the contact store.

Anything else (bad SQL, constraint violations, unopenable files) surfaces as
the ``sqlite3`` exception raised by the driver.
"""


class ContactBookError(Exception):
    """Base class for contact store errors."""


class InvalidDataError(ContactBookError):
    """Record contents were rejected."""


class NoIdError(ContactBookError):
    """The generated row id could not be retrieved after an insert."""

    def __init__(self, table: str):
        super().__init__(f"no id generated for new {table} row")
        self.table = table


class NotFoundError(ContactBookError):
    """A lookup by id matched zero rows."""

    def __init__(self, table: str, row_id: int):
        super().__init__(f"{table} {row_id} not found")
        self.table = table
        self.row_id = row_id
