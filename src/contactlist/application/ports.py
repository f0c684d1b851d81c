"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactlist.domain import Contact


class ContactStore(Protocol):
    """Holds the ordered contact collection."""

    def add(self, contact: Contact) -> bool:
        """Append a contact. Returns False (and stores nothing) if its id is already taken."""
        ...

    def replace(self, contact: Contact) -> Contact | None:
        """Replace the contact with the same id, keeping its position and created_at.
        Returns the stored contact, or None if not found.
        """
        ...

    def remove(self, contact_id: str) -> bool:
        """Remove the contact if present. Returns True if something was removed."""
        ...

    def get_by_id(self, contact_id: str) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order, as a new list."""
        ...
