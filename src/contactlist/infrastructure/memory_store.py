"""In-memory implementation of ContactStore (no DB). State resets with the process."""

import dataclasses
import threading

from contactlist.domain import Contact


class InMemoryContactStore:
    """Stores contacts in memory. Order preserved by insertion; ids are unique.
    Every operation holds one lock, so a store can be shared by a web server's worker threads.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Contact] = {}
        self._order: list[str] = []
        self._lock = threading.Lock()

    def add(self, contact: Contact) -> bool:
        with self._lock:
            if contact.id in self._by_id:
                return False
            self._by_id[contact.id] = contact
            self._order.append(contact.id)
            return True

    def replace(self, contact: Contact) -> Contact | None:
        with self._lock:
            existing = self._by_id.get(contact.id)
            if existing is None:
                return None
            stored = dataclasses.replace(contact, created_at=existing.created_at)
            # Same key: position in _order is untouched.
            self._by_id[contact.id] = stored
            return stored

    def remove(self, contact_id: str) -> bool:
        with self._lock:
            if self._by_id.pop(contact_id, None) is None:
                return False
            self._order.remove(contact_id)
            return True

    def get_by_id(self, contact_id: str) -> Contact | None:
        with self._lock:
            return self._by_id.get(contact_id)

    def list_all(self) -> list[Contact]:
        with self._lock:
            return [self._by_id[cid] for cid in self._order if cid in self._by_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._order)
