"""Address domain model — a postal address a person may live at."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

UNASSIGNED_ID = -1


@dataclass
class Address:
    """A row of the ``address`` table.

    ``id`` stays at ``UNASSIGNED_ID`` until the store inserts the address.
    """

    street: str
    zip: str
    city: str
    phone: Optional[str] = None
    id: int = UNASSIGNED_ID

    @property
    def is_persisted(self) -> bool:
        return self.id != UNASSIGNED_ID

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "street": self.street,
            "zip": self.zip,
            "city": self.city,
            "phone": self.phone,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Address":
        return cls(
            id=row["id"],
            street=row["street"],
            zip=row["zip"],
            city=row["city"],
            phone=row.get("phone"),
        )
