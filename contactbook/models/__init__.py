"""Domain models for the contact book."""

from contactbook.models.address import Address, UNASSIGNED_ID
from contactbook.models.person import Person

__all__ = ["Address", "Person", "UNASSIGNED_ID"]
