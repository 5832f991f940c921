"""Person domain model — a contact, optionally linked to one address."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from contactbook.models.address import UNASSIGNED_ID, Address


@dataclass
class Person:
    """A row of the ``person`` table plus its resolved address.

    ``address_id`` mirrors the foreign-key column; ``address`` is only filled
    in memory and is never stored redundantly.
    """

    first_name: str
    last_name: str
    mobile: Optional[str] = None
    address: Optional[Address] = None
    id: int = UNASSIGNED_ID
    address_id: Optional[int] = field(default=None, compare=False)

    @property
    def is_persisted(self) -> bool:
        return self.id != UNASSIGNED_ID

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "mobile": self.mobile,
            "address": self.address_id,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any], address: Optional[Address] = None) -> "Person":
        return cls(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            mobile=row.get("mobile"),
            address_id=row.get("address"),
            address=address,
        )
