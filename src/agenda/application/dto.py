"""DTOs for the application layer: form input, view models and flow results."""

from dataclasses import dataclass, field

DETAIL_FOUND = "found"
DETAIL_INVALID_ID = "invalid_id"
DETAIL_NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ContactForm:
    """Raw create-form input. Nothing is validated or trimmed."""

    name: str = ""
    email: str = ""
    phone: str = ""


@dataclass(frozen=True)
class ContactRow:
    contact_id: int
    name: str
    email: str
    phone: str
    detail_url: str
    delete_url: str


@dataclass(frozen=True)
class ContactListView:
    rows: list[ContactRow] = field(default_factory=list)


@dataclass(frozen=True)
class ContactDetailView:
    """Either the contact fields (status found) or a message for the user."""

    status: str
    contact_id: int | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class ContactCreated:
    contact_id: int
    name: str


@dataclass(frozen=True)
class PendingDelete:
    pending_id: str
    contact_id: int
    prompt: str
    state: str


@dataclass(frozen=True)
class DeleteCancelled:
    contact_id: int


@dataclass(frozen=True)
class PendingNotFound:
    pending_id: str
