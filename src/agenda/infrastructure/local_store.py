"""Contact collection stored as one JSON blob under a fixed storage key."""

import json
import logging

from agenda.application.ports import KeyValueStorage
from agenda.domain import Contact
from agenda.infrastructure.records import contact_to_record, contacts_from_records

logger = logging.getLogger(__name__)

CONTACTS_KEY = "contacts"


class LocalContactStore:
    """Implements ContactStore over any KeyValueStorage. Every write replaces the whole value."""

    def __init__(self, storage: KeyValueStorage, key: str = CONTACTS_KEY) -> None:
        self._storage = storage
        self._key = key

    def read(self) -> list[Contact] | None:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return None
        try:
            return contacts_from_records(json.loads(raw))
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError is a ValueError too; deep nesting raises RecursionError.
            logger.warning("Ignoring invalid value under storage key %r: %s", self._key, exc)
            return None

    def write(self, contacts: list[Contact]) -> None:
        value = json.dumps([contact_to_record(c) for c in contacts], ensure_ascii=False)
        self._storage.set_item(self._key, value)

    def clear(self) -> None:
        self._storage.remove_item(self._key)
