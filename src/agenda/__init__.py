"""
Agenda core: clean-architecture layout.

- domain: Contact entity and id assignment. No outer dependencies.
- application: use cases (ContactService), lazy-seeding ContactRepository, ports, views.
- infrastructure: adapters (storage backends, LocalContactStore, SeedLoader).
"""

from agenda.application import (
    ContactCreated,
    ContactDetailView,
    ContactForm,
    ContactListView,
    ContactRepository,
    ContactService,
    DeleteCancelled,
    PendingDelete,
    PendingNotFound,
)
from agenda.domain import Contact, next_contact_id
from agenda.infrastructure import (
    InMemoryStorage,
    JsonFileStorage,
    LocalContactStore,
    Neo4jStorage,
    SeedLoader,
)

__all__ = [
    "Contact",
    "ContactCreated",
    "ContactDetailView",
    "ContactForm",
    "ContactListView",
    "ContactRepository",
    "ContactService",
    "DeleteCancelled",
    "InMemoryStorage",
    "JsonFileStorage",
    "LocalContactStore",
    "Neo4jStorage",
    "PendingDelete",
    "PendingNotFound",
    "SeedLoader",
    "next_contact_id",
]
