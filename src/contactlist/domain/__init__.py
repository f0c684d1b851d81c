"""Domain layer: the Contact entity and its enumerations. No dependencies on outer layers."""

from contactlist.domain.entities import (
    Contact,
    ContactFilter,
    ContactPriority,
    ContactStats,
    ContactStatus,
)

__all__ = [
    "Contact",
    "ContactFilter",
    "ContactPriority",
    "ContactStats",
    "ContactStatus",
]
