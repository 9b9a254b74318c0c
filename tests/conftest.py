"""Shared test doubles: in-memory storage and a seed source that counts loads."""

import pytest

from agenda.application import ContactRepository, ContactService
from agenda.domain import Contact
from agenda.infrastructure import InMemoryStorage, LocalContactStore


class CountingSeed:
    """SeedSource returning a fixed list and recording how often it was loaded."""

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self.contacts = list(contacts or [])
        self.loads = 0

    async def load(self) -> list[Contact]:
        self.loads += 1
        return list(self.contacts)


class CountingStore(LocalContactStore):
    """LocalContactStore that records reads and writes."""

    def __init__(self, storage) -> None:
        super().__init__(storage)
        self.reads = 0
        self.writes = 0

    def read(self):
        self.reads += 1
        return super().read()

    def write(self, contacts):
        self.writes += 1
        super().write(contacts)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage) -> CountingStore:
    return CountingStore(storage)


@pytest.fixture
def seed() -> CountingSeed:
    return CountingSeed([Contact(id=1, name="Ana", email="a@x.com", phone="111")])


@pytest.fixture
def service(store, seed) -> ContactService:
    return ContactService(ContactRepository(store, seed))
