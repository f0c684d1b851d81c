"""
Contact list core: clean-architecture layout.

- domain: Contact entity, ContactStatus / ContactPriority / ContactFilter enums, ContactStats.
- application: use cases (ContactService), port (ContactStore), DTOs and result types.
- infrastructure: adapters (InMemoryContactStore) and phone normalization.
"""

from contactlist.application import (
    ContactAdded,
    ContactFormData,
    ContactNotFound,
    ContactService,
    ContactStore,
    ContactUpdated,
    DuplicateContactId,
    Invalid,
)
from contactlist.domain import (
    Contact,
    ContactFilter,
    ContactPriority,
    ContactStats,
    ContactStatus,
)
from contactlist.infrastructure import InMemoryContactStore

__all__ = [
    "Contact",
    "ContactAdded",
    "ContactFilter",
    "ContactFormData",
    "ContactNotFound",
    "ContactPriority",
    "ContactService",
    "ContactStats",
    "ContactStatus",
    "ContactStore",
    "ContactUpdated",
    "DuplicateContactId",
    "InMemoryContactStore",
    "Invalid",
]
