"""Domain entities: Contact, its status/priority enumerations, filters and stats."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ContactStatus(str, Enum):
    """Follow-up state of a contact."""

    PENDING = "pending"
    COMPLETED = "completed"


class ContactPriority(str, Enum):
    """Urgency tag, independent of status."""

    URGENT = "urgent"
    IMPORTANT = "important"
    NORMAL = "normal"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Contact:
    """
    One person with contact details, a workflow status and a priority tag.
    A Contact is immutable; an edit produces a new value with the same id and created_at.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    full_name: str = ""
    email: str = ""
    phone: str = ""
    status: ContactStatus = ContactStatus.PENDING
    priority: ContactPriority = ContactPriority.NORMAL
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError("Contact id must be non-empty.")
        # Accept plain strings ("pending", "urgent") and reject anything outside the enums.
        object.__setattr__(self, "status", ContactStatus(self.status))
        object.__setattr__(self, "priority", ContactPriority(self.priority))


class ContactFilter(str, Enum):
    """Selects a subsequence of contacts: everything, or one status or priority value."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    URGENT = "urgent"
    IMPORTANT = "important"
    NORMAL = "normal"

    def matches(self, contact: Contact) -> bool:
        match self:
            case ContactFilter.ALL:
                return True
            case ContactFilter.PENDING:
                return contact.status is ContactStatus.PENDING
            case ContactFilter.COMPLETED:
                return contact.status is ContactStatus.COMPLETED
            case ContactFilter.URGENT:
                return contact.priority is ContactPriority.URGENT
            case ContactFilter.IMPORTANT:
                return contact.priority is ContactPriority.IMPORTANT
            case ContactFilter.NORMAL:
                return contact.priority is ContactPriority.NORMAL
            case _:
                raise ValueError(f"Unhandled contact filter: {self!r}")


@dataclass(frozen=True)
class ContactStats:
    """Counters shown above the contact list."""

    total: int = 0
    pending: int = 0
    completed: int = 0
    urgent: int = 0
    important: int = 0

    @classmethod
    def from_contacts(cls, contacts: list[Contact]) -> "ContactStats":
        pending = completed = urgent = important = 0
        for contact in contacts:
            match contact.status:
                case ContactStatus.PENDING:
                    pending += 1
                case ContactStatus.COMPLETED:
                    completed += 1
                case _:
                    raise ValueError(f"Unhandled contact status: {contact.status!r}")
            match contact.priority:
                case ContactPriority.URGENT:
                    urgent += 1
                case ContactPriority.IMPORTANT:
                    important += 1
                case ContactPriority.NORMAL:
                    pass
                case _:
                    raise ValueError(f"Unhandled contact priority: {contact.priority!r}")
        return cls(
            total=len(contacts),
            pending=pending,
            completed=completed,
            urgent=urgent,
            important=important,
        )
