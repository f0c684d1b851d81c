"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactlist.application.contact_service import ContactService
from contactlist.application.dto import (
    ContactAdded,
    ContactFormData,
    ContactNotFound,
    ContactUpdated,
    DuplicateContactId,
    Invalid,
)
from contactlist.application.ports import ContactStore

__all__ = [
    "ContactAdded",
    "ContactFormData",
    "ContactNotFound",
    "ContactService",
    "ContactStore",
    "ContactUpdated",
    "DuplicateContactId",
    "Invalid",
]
