"""Conversion between Contact and its JSON record form."""

from typing import Any

from agenda.domain import Contact

# Older seed files use these field names.
_ALIASES = {"name": "nom", "phone": "telefon"}


def _text(record: dict[str, Any], key: str) -> str:
    value = record.get(key)
    if value is None and key in _ALIASES:
        value = record.get(_ALIASES[key])
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Contact field '{key}' must be a string.")
    return value


def contact_from_record(record: Any) -> Contact:
    """Build a Contact from a decoded JSON object. Raises ValueError if not contact-shaped."""
    if not isinstance(record, dict):
        raise ValueError("Contact record must be an object.")
    return Contact(
        id=record.get("id"),
        name=_text(record, "name"),
        email=_text(record, "email"),
        phone=_text(record, "phone"),
    )


def contact_to_record(contact: Contact) -> dict[str, Any]:
    return {
        "id": contact.id,
        "name": contact.name,
        "email": contact.email,
        "phone": contact.phone,
    }


def contacts_from_records(records: Any) -> list[Contact]:
    """Decode a list of records. Raises ValueError on any bad record or duplicate id."""
    if not isinstance(records, list):
        raise ValueError("Contact collection must be a list.")
    contacts = [contact_from_record(r) for r in records]
    ids = [c.id for c in contacts]
    if len(ids) != len(set(ids)):
        raise ValueError("Contact ids must be unique.")
    return contacts
