"""Input DTO and result types for the contact use cases."""

from dataclasses import dataclass

from contactlist.domain import Contact, ContactPriority, ContactStatus


@dataclass(frozen=True)
class ContactFormData:
    """Fields collected by a create/edit form. Core has no HTTP dependency."""

    full_name: str
    email: str
    phone: str
    status: ContactStatus | str = ContactStatus.PENDING
    priority: ContactPriority | str = ContactPriority.NORMAL


# --- add / create_contact results ---


@dataclass(frozen=True)
class ContactAdded:
    """Contact was appended to the store."""

    contact: Contact


@dataclass(frozen=True)
class DuplicateContactId:
    """A contact with this id is already stored; nothing was added."""

    contact_id: str


@dataclass(frozen=True)
class Invalid:
    """Form data is invalid (e.g. missing or empty required field)."""

    reason: str


# --- edit / update_contact results ---


@dataclass(frozen=True)
class ContactUpdated:
    """Contact was replaced in place."""

    contact: Contact


@dataclass(frozen=True)
class ContactNotFound:
    """No stored contact has this id."""

    contact_id: str
