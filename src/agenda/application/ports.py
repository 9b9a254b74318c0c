"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from agenda.domain import Contact


class KeyValueStorage(Protocol):
    """String values under string keys; the persistent local storage facility."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, overwriting any prior value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove the key. No-op if absent."""
        ...


class ContactStore(Protocol):
    """Reads and writes the whole contact collection as one value."""

    def read(self) -> list[Contact] | None:
        """Return the stored collection, or None if nothing valid is stored."""
        ...

    def write(self, contacts: list[Contact]) -> None:
        """Replace the stored collection."""
        ...


class SeedSource(Protocol):
    """Provides the initial collection when storage is empty."""

    async def load(self) -> list[Contact]:
        """Return the seed contacts. Must not raise; [] on failure."""
        ...


class ConfirmationFlow(Protocol):
    """State machine for a pending delete: initial state, then CONFIRM or CANCEL."""

    initial: str

    def advance(self, state_value: str, event: str) -> str | None:
        """Return the next state value, or None if the event does not apply."""
        ...
