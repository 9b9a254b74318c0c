"""List, detail, create and delete flows. Single pending delete per service instance."""

import uuid
from collections.abc import Callable

from agenda.application.confirmation import (
    CANCEL,
    CONFIRM,
    CONFIRMED,
    TwoStepConfirmation,
)
from agenda.application.contact_repository import ContactRepository
from agenda.application.dto import (
    ContactCreated,
    ContactDetailView,
    ContactForm,
    ContactListView,
    DeleteCancelled,
    PendingDelete,
    PendingNotFound,
)
from agenda.application.ports import ConfirmationFlow
from agenda.application.views import (
    DEFAULT_MESSAGES,
    parse_contact_id,
    render_contact_detail,
    render_contact_list,
    render_invalid_id,
)
from agenda.domain import Contact, next_contact_id


class ContactService:
    """Core flows over the repository. Delete: request -> pending -> confirm/cancel."""

    def __init__(
        self,
        repository: ContactRepository,
        *,
        messages: dict[str, str] | None = None,
        confirmation: ConfirmationFlow | None = None,
    ) -> None:
        self._repo = repository
        self._messages = {**DEFAULT_MESSAGES, **(messages or {})}
        self._confirmation = confirmation or TwoStepConfirmation()
        self._pending: PendingDelete | None = None

    async def list_view(self) -> ContactListView:
        return render_contact_list(await self._repo.get_contacts())

    async def detail_view(self, raw_id: str | None) -> ContactDetailView:
        """Render the contact named by the raw `id` query value.

        An invalid id is answered without touching the repository.
        """
        contact_id = parse_contact_id(raw_id)
        if contact_id is None:
            return render_invalid_id(self._messages)
        contacts = await self._repo.get_contacts()
        found = next((c for c in contacts if c.id == contact_id), None)
        return render_contact_detail(found, self._messages)

    async def create_contact(self, form: ContactForm) -> ContactCreated:
        """Append a new contact with id max+1 and persist the whole collection."""
        contacts = list(await self._repo.get_contacts())
        contact = Contact(
            id=next_contact_id(contacts),
            name=form.name,
            email=form.email,
            phone=form.phone,
        )
        contacts.append(contact)
        self._repo.save_contacts(contacts)
        return ContactCreated(contact_id=contact.id, name=contact.name)

    async def _remove(self, contact_id: int) -> ContactListView:
        contacts = await self._repo.get_contacts()
        self._repo.save_contacts([c for c in contacts if c.id != contact_id])
        return await self.list_view()

    def request_delete(self, contact_id: int) -> PendingDelete:
        """Start a delete that waits for confirmation. Replaces any earlier pending delete."""
        pending = PendingDelete(
            pending_id=str(uuid.uuid4()),
            contact_id=contact_id,
            prompt=self._messages["delete_prompt"],
            state=self._confirmation.initial,
        )
        self._pending = pending
        return pending

    async def resolve_delete(
        self, pending_id: str, confirmed: bool
    ) -> ContactListView | DeleteCancelled | PendingNotFound:
        """Feed CONFIRM or CANCEL to the confirmation flow of the pending delete."""
        pending = self._pending
        if pending is None or pending.pending_id != pending_id:
            return PendingNotFound(pending_id=pending_id)
        next_state = self._confirmation.advance(
            pending.state, CONFIRM if confirmed else CANCEL
        )
        self._pending = None
        if next_state is None:
            return PendingNotFound(pending_id=pending_id)
        if next_state != CONFIRMED:
            return DeleteCancelled(contact_id=pending.contact_id)
        return await self._remove(pending.contact_id)

    async def delete_contact(
        self, contact_id: int, confirm: Callable[[str], bool]
    ) -> ContactListView | DeleteCancelled:
        """Ask confirm(prompt); on yes remove the contact and return the re-rendered list.

        Leaves any pending delete from request_delete untouched.
        """
        if not confirm(self._messages["delete_prompt"]):
            return DeleteCancelled(contact_id=contact_id)
        return await self._remove(contact_id)
