"""Domain layer: entities and value objects. No dependencies on outer layers."""

from agenda.domain.entities import Contact, next_contact_id

__all__ = ["Contact", "next_contact_id"]
