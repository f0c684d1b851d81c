"""Infrastructure layer: concrete implementations of application ports."""

from contactlist.infrastructure.memory_store import InMemoryContactStore
from contactlist.infrastructure.phone import DEFAULT_PHONE_REGION, normalize_phone

__all__ = [
    "DEFAULT_PHONE_REGION",
    "InMemoryContactStore",
    "normalize_phone",
]
