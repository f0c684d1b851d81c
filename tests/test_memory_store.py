"""Tests for InMemoryContactStore: ordering, id uniqueness, in-place replace, shared use across threads."""

import threading
from datetime import datetime, timezone

from contactlist.application import ContactService
from contactlist.domain import Contact, ContactStatus
from contactlist.infrastructure import InMemoryContactStore


def _contact(contact_id: str, **overrides) -> Contact:
    fields = {"id": contact_id, "full_name": contact_id, "email": "x@example.com", "phone": "1"}
    fields.update(overrides)
    return Contact(**fields)


def test_add_appends_and_rejects_duplicate_id():
    store = InMemoryContactStore()
    assert store.add(_contact("a")) is True
    assert store.add(_contact("b")) is True
    assert store.add(_contact("a", full_name="other")) is False

    assert len(store) == 2
    assert [c.id for c in store.list_all()] == ["a", "b"]
    assert store.get_by_id("a").full_name == "a"


def test_replace_keeps_position_and_created_at():
    store = InMemoryContactStore()
    first_created = datetime(2023, 1, 1, tzinfo=timezone.utc)
    store.add(_contact("a", created_at=first_created))
    store.add(_contact("b"))
    store.add(_contact("c"))

    stored = store.replace(
        _contact("a", full_name="A2", status=ContactStatus.COMPLETED, created_at=datetime.now(timezone.utc))
    )
    assert stored is not None
    assert stored.full_name == "A2"
    assert stored.created_at == first_created
    assert [c.id for c in store.list_all()] == ["a", "b", "c"]
    assert store.get_by_id("a") == stored


def test_replace_unknown_returns_none():
    store = InMemoryContactStore()
    store.add(_contact("a"))
    assert store.replace(_contact("z")) is None
    assert [c.id for c in store.list_all()] == ["a"]


def test_remove_reports_whether_removed():
    store = InMemoryContactStore()
    store.add(_contact("a"))
    store.add(_contact("b"))

    assert store.remove("a") is True
    assert store.remove("a") is False
    assert store.remove("never") is False
    assert [c.id for c in store.list_all()] == ["b"]
    assert store.get_by_id("a") is None


def test_removed_id_can_be_added_again_at_end():
    store = InMemoryContactStore()
    store.add(_contact("a"))
    store.add(_contact("b"))
    store.remove("a")
    assert store.add(_contact("a")) is True
    assert [c.id for c in store.list_all()] == ["b", "a"]


def test_list_all_returns_new_list():
    store = InMemoryContactStore()
    store.add(_contact("a"))
    listed = store.list_all()
    listed.append(_contact("b"))
    assert [c.id for c in store.list_all()] == ["a"]


def test_reads_during_concurrent_add_and_remove_never_fail():
    store = InMemoryContactStore()
    service = ContactService(store)
    errors: list[str] = []
    done = threading.Event()

    def churn():
        try:
            for i in range(3000):
                store.add(_contact(str(i)))
                store.remove(str(i))
        finally:
            done.set()

    def read():
        while not done.is_set():
            try:
                listed = service.list_contacts()
                stats = service.stats()
                assert len(listed) <= 1
                assert stats.total <= 1
            except Exception as exc:  # noqa: BLE001
                errors.append(repr(exc))
                return

    readers = [threading.Thread(target=read) for _ in range(3)]
    writer = threading.Thread(target=churn)
    for t in readers:
        t.start()
    writer.start()
    writer.join()
    for t in readers:
        t.join()

    assert errors == []
    assert store.list_all() == []
