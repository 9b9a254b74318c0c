"""Contact collection with lazy seeding from the seed source."""

import logging

from agenda.application.ports import ContactStore, SeedSource
from agenda.domain import Contact

logger = logging.getLogger(__name__)


class ContactRepository:
    """Composes a ContactStore and a SeedSource.

    Empty storage is seeded on first access. There is no single-flight guard:
    two concurrent callers on empty storage both fetch and write the seed,
    and the later write wins.
    """

    def __init__(self, store: ContactStore, seed: SeedSource) -> None:
        self._store = store
        self._seed = seed

    async def get_contacts(self) -> list[Contact]:
        """Return the stored collection, seeding and persisting it if storage is empty."""
        contacts = self._store.read()
        if contacts is None:
            contacts = await self._seed.load()
            self._store.write(contacts)
            logger.info("Seeded contact storage with %d contacts", len(contacts))
        return contacts

    def save_contacts(self, contacts: list[Contact]) -> None:
        self._store.write(contacts)
