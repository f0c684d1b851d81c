"""Contact add, edit, remove, list, filter and stats over an explicit store instance."""

import dataclasses
import logging
import uuid
from datetime import datetime, timezone

from contactlist.application.dto import (
    ContactAdded,
    ContactFormData,
    ContactNotFound,
    ContactUpdated,
    DuplicateContactId,
    Invalid,
)
from contactlist.application.ports import ContactStore
from contactlist.domain import Contact, ContactFilter, ContactStats

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = (
    ("full_name", "Full name"),
    ("email", "Email"),
    ("phone", "Phone"),
)


def _clean_form(form: ContactFormData) -> ContactFormData | Invalid:
    """Trim text fields; return Invalid naming the first blank required field."""
    values = {}
    for attr, label in _REQUIRED_FIELDS:
        value = (getattr(form, attr) or "").strip()
        if not value:
            return Invalid(reason=f"{label} is required.")
        values[attr] = value
    return dataclasses.replace(form, **values)


class ContactService:
    """Core flow: add / edit / remove contacts, derived filtered views and counters."""

    def __init__(self, store: ContactStore) -> None:
        self._store = store

    def add(self, contact: Contact) -> ContactAdded | DuplicateContactId:
        """Append a fully-formed contact (caller-assigned id and created_at)."""
        if not self._store.add(contact):
            logger.warning("Rejected contact with duplicate id %s", contact.id)
            return DuplicateContactId(contact_id=contact.id)
        logger.info("Added contact %s", contact.id)
        return ContactAdded(contact=contact)

    def edit(self, contact: Contact) -> ContactUpdated | ContactNotFound:
        """Replace every field of the stored contact except id and created_at."""
        stored = self._store.replace(contact)
        if stored is None:
            logger.info("Edit of unknown contact %s", contact.id)
            return ContactNotFound(contact_id=contact.id)
        logger.info("Updated contact %s", contact.id)
        return ContactUpdated(contact=stored)

    def remove(self, contact_id: str) -> None:
        """Remove a contact. Unknown ids are a no-op."""
        if self._store.remove(contact_id):
            logger.info("Removed contact %s", contact_id)
        else:
            logger.debug("Remove of unknown contact %s ignored", contact_id)

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        return self._store.list_all()

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return the contact with this id, or None."""
        return self._store.get_by_id(contact_id)

    def filter_contacts(self, contact_filter: ContactFilter | str) -> list[Contact]:
        """Return contacts whose status or priority equals the filter; "all" returns everything."""
        selected = ContactFilter(contact_filter)
        return [c for c in self._store.list_all() if selected.matches(c)]

    def stats(self) -> ContactStats:
        """Count contacts by status and by urgent/important priority."""
        return ContactStats.from_contacts(self._store.list_all())

    def create_contact(
        self, form: ContactFormData
    ) -> ContactAdded | Invalid | DuplicateContactId:
        """Build a new contact from form data (fresh id, current time) and add it."""
        cleaned = _clean_form(form)
        if isinstance(cleaned, Invalid):
            return cleaned
        try:
            contact = Contact(
                id=str(uuid.uuid4()),
                full_name=cleaned.full_name,
                email=cleaned.email,
                phone=cleaned.phone,
                status=cleaned.status,
                priority=cleaned.priority,
                created_at=datetime.now(timezone.utc),
            )
        except ValueError as exc:
            return Invalid(reason=str(exc))
        return self.add(contact)

    def update_contact(
        self, contact_id: str, form: ContactFormData
    ) -> ContactUpdated | ContactNotFound | Invalid:
        """Edit an existing contact from form data. Keeps its id and created_at."""
        cleaned = _clean_form(form)
        if isinstance(cleaned, Invalid):
            return cleaned
        existing = self._store.get_by_id(contact_id)
        if existing is None:
            return ContactNotFound(contact_id=contact_id)
        try:
            contact = Contact(
                id=existing.id,
                full_name=cleaned.full_name,
                email=cleaned.email,
                phone=cleaned.phone,
                status=cleaned.status,
                priority=cleaned.priority,
                created_at=existing.created_at,
            )
        except ValueError as exc:
            return Invalid(reason=str(exc))
        return self.edit(contact)
