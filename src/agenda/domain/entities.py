"""Domain entities: Contact and id assignment."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    A record in the directory.
    Text fields are free-form; only the id is checked.
    """

    id: int
    name: str = ""
    email: str = ""
    phone: str = ""

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError("Contact id must be an integer.")
        if self.id <= 0:
            raise ValueError("Contact id must be positive.")


def next_contact_id(contacts: Iterable[Contact]) -> int:
    """Return max(existing ids) + 1, or 1 for an empty collection."""
    return max((c.id for c in contacts), default=0) + 1
