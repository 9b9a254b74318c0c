"""Infrastructure layer: concrete implementations of application ports."""

from agenda.infrastructure.file_storage import JsonFileStorage
from agenda.infrastructure.local_store import CONTACTS_KEY, LocalContactStore
from agenda.infrastructure.memory_storage import InMemoryStorage
from agenda.infrastructure.persistence.neo4j_storage import (
    Neo4jStorage,
    ensure_storage_constraint,
)
from agenda.infrastructure.seed_loader import SeedLoader

__all__ = [
    "CONTACTS_KEY",
    "InMemoryStorage",
    "JsonFileStorage",
    "LocalContactStore",
    "Neo4jStorage",
    "SeedLoader",
    "ensure_storage_constraint",
]
