"""Pure rendering: collection -> view model. No storage access here."""

import re

from agenda.application.dto import (
    DETAIL_FOUND,
    DETAIL_INVALID_ID,
    DETAIL_NOT_FOUND,
    ContactDetailView,
    ContactListView,
    ContactRow,
)
from agenda.domain import Contact

DEFAULT_MESSAGES = {
    "invalid_id": "Invalid contact ID.",
    "not_found": "Contact not found.",
    "delete_prompt": "Are you sure you want to delete this contact?",
}

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)", re.ASCII)


def detail_url(contact_id: int) -> str:
    return f"/detail?id={contact_id}"


def delete_url(contact_id: int) -> str:
    return f"/contacts/{contact_id}/delete"


def parse_contact_id(raw: str | None) -> int | None:
    """Parse the id query value the way parseInt does: leading sign and ASCII digits.

    Trailing text is ignored ("12abc" is 12). Returns None for no digits or a value <= 0.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    value = int(match.group(1) + match.group(2))
    return value if value > 0 else None


def render_contact_list(contacts: list[Contact]) -> ContactListView:
    return ContactListView(
        rows=[
            ContactRow(
                contact_id=c.id,
                name=c.name,
                email=c.email,
                phone=c.phone,
                detail_url=detail_url(c.id),
                delete_url=delete_url(c.id),
            )
            for c in contacts
        ]
    )


def render_contact_detail(
    contact: Contact | None, messages: dict[str, str] | None = None
) -> ContactDetailView:
    """Render one contact, or the not-found message when contact is None."""
    if contact is None:
        texts = messages or DEFAULT_MESSAGES
        return ContactDetailView(status=DETAIL_NOT_FOUND, message=texts["not_found"])
    return ContactDetailView(
        status=DETAIL_FOUND,
        contact_id=contact.id,
        name=contact.name,
        email=contact.email,
        phone=contact.phone,
    )


def render_invalid_id(messages: dict[str, str] | None = None) -> ContactDetailView:
    texts = messages or DEFAULT_MESSAGES
    return ContactDetailView(status=DETAIL_INVALID_ID, message=texts["invalid_id"])
