"""Application layer: use cases, ports, views and DTOs. Depends only on domain."""

from agenda.application.confirmation import (
    CANCELLED,
    CONFIRMED,
    PENDING_CONFIRMATION,
    TwoStepConfirmation,
)
from agenda.application.contact_repository import ContactRepository
from agenda.application.contact_service import ContactService
from agenda.application.dto import (
    DETAIL_FOUND,
    DETAIL_INVALID_ID,
    DETAIL_NOT_FOUND,
    ContactCreated,
    ContactDetailView,
    ContactForm,
    ContactListView,
    ContactRow,
    DeleteCancelled,
    PendingDelete,
    PendingNotFound,
)
from agenda.application.ports import (
    ConfirmationFlow,
    ContactStore,
    KeyValueStorage,
    SeedSource,
)
from agenda.application.views import (
    DEFAULT_MESSAGES,
    parse_contact_id,
    render_contact_detail,
    render_contact_list,
)

__all__ = [
    "CANCELLED",
    "CONFIRMED",
    "DEFAULT_MESSAGES",
    "DETAIL_FOUND",
    "DETAIL_INVALID_ID",
    "DETAIL_NOT_FOUND",
    "PENDING_CONFIRMATION",
    "ConfirmationFlow",
    "ContactCreated",
    "ContactDetailView",
    "ContactForm",
    "ContactListView",
    "ContactRepository",
    "ContactRow",
    "ContactService",
    "ContactStore",
    "DeleteCancelled",
    "KeyValueStorage",
    "PendingDelete",
    "PendingNotFound",
    "SeedSource",
    "TwoStepConfirmation",
    "parse_contact_id",
    "render_contact_detail",
    "render_contact_list",
]
