"""Tests for the Contact entity, its enums, filters and stats."""

import dataclasses
from datetime import timezone

import pytest

from contactlist.domain import (
    Contact,
    ContactFilter,
    ContactPriority,
    ContactStats,
    ContactStatus,
)


def test_defaults():
    contact = Contact(full_name="Ana", email="ana@example.com", phone="1")
    assert contact.id
    assert contact.status is ContactStatus.PENDING
    assert contact.priority is ContactPriority.NORMAL
    assert contact.created_at.tzinfo is timezone.utc


def test_default_ids_differ():
    assert Contact().id != Contact().id


def test_string_enums_are_coerced():
    contact = Contact(id="1", status="completed", priority="important")
    assert contact.status is ContactStatus.COMPLETED
    assert contact.priority is ContactPriority.IMPORTANT


@pytest.mark.parametrize("field", ["status", "priority"])
def test_unknown_enum_value_raises(field):
    with pytest.raises(ValueError):
        Contact(id="1", **{field: "concluido"})


def test_empty_id_raises():
    with pytest.raises(ValueError, match="id"):
        Contact(id="  ")


def test_contact_is_immutable():
    contact = Contact(id="1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        contact.full_name = "changed"


def test_filter_matches_every_combination():
    for status in ContactStatus:
        for priority in ContactPriority:
            contact = Contact(id="1", status=status, priority=priority)
            matched = {f for f in ContactFilter if f.matches(contact)}
            assert matched == {
                ContactFilter.ALL,
                ContactFilter(status.value),
                ContactFilter(priority.value),
            }


def test_stats_from_contacts():
    contacts = [
        Contact(id="1", status="pending", priority="urgent"),
        Contact(id="2", status="completed", priority="important"),
        Contact(id="3", status="completed", priority="normal"),
    ]
    assert ContactStats.from_contacts(contacts) == ContactStats(
        total=3, pending=1, completed=2, urgent=1, important=1
    )
    assert ContactStats.from_contacts([]) == ContactStats()
