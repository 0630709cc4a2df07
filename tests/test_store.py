from __future__ import annotations

from datetime import date, datetime

import pytest

from city_tutors_crm.store import CRMStore, DonorDirectory, add_years, format_currency, month_bounds
from city_tutors_crm.storage import SQLiteKeyValueStorage


def _build_store(tmp_path) -> CRMStore:  # type: ignore[no-untyped-def]
    storage = SQLiteKeyValueStorage(tmp_path / "city_tutors_crm_test.db")
    storage.init_db()
    return CRMStore(storage)


def test_first_load_returns_sample_data(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)

    assert len(store.list_board_members()) == 8
    assert len(store.list_events()) == 10
    assert len(store.list_transactions()) == 12
    assert len(store.list_budgets()) == 5
    assert len(store.donors.get()) == 13


def test_board_member_changes_persist_across_instances(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)

    member = store.add_board_member(
        name="  Jordan Reyes  ",
        company="Reyes Partners",
        committees=["Finance"],
        today=date(2024, 3, 1),
    )

    assert member.name == "Jordan Reyes"
    assert member.position == "member"
    assert member.seat_number == 8
    assert member.attendance == 85
    assert member.term_start == date(2024, 3, 1)
    assert member.term_end == date(2027, 3, 1)

    store.update_board_member(member.id, attendance=70, position="secretary")

    reopened = _build_store(tmp_path)
    stored = reopened.get_board_member(member.id)
    assert stored is not None
    assert stored.attendance == 70
    assert stored.position == "secretary"
    assert stored.committees == ["Finance"]


def test_add_board_member_defaults_blank_name(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)

    member = store.add_board_member(name="   ")

    assert member.name == "New Member"


def test_deleting_chair_leaves_seat_gap(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)
    chair = next(member for member in store.list_board_members() if member.position == "chair")

    assert store.delete_board_member(chair.id) is True
    assert store.delete_board_member(chair.id) is False

    seats = [member.seat_number for member in store.list_board_members()]
    assert seats == [1, 2, 3, 4, 5, 6, 7]

    newcomer = store.add_board_member(name="Taylor Brooks")
    assert newcomer.seat_number == 7
    assert [member.seat_number for member in store.list_board_members()].count(7) == 2


def test_update_unknown_board_member_raises(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)

    with pytest.raises(KeyError):
        store.update_board_member("missing", name="Nobody")


def test_event_validation_and_updates(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)

    with pytest.raises(ValueError):
        store.add_event(title="   ", event_date=date(2024, 4, 1))

    event = store.add_event(
        title="Tutor Orientation",
        event_date=date(2024, 4, 1),
        location="Main Office",
    )
    assert event.date == datetime(2024, 4, 1)
    assert event.start_time == "09:00"
    assert event.type == "meeting"
    assert event.status == "scheduled"
    assert event.priority == "medium"

    with pytest.raises(ValueError):
        store.update_event(event.id, title="")

    moved = store.update_event(event.id, date=date(2024, 4, 3), status="cancelled")
    assert moved.date == datetime(2024, 4, 3)

    reopened = _build_store(tmp_path)
    stored = reopened.get_event(event.id)
    assert stored is not None
    assert stored.status == "cancelled"
    assert stored.location == "Main Office"

    assert reopened.delete_event(event.id) is True
    assert reopened.get_event(event.id) is None


def test_add_transaction_validates_and_normalizes_sign(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)

    with pytest.raises(ValueError):
        store.add_transaction(description="", amount=100)
    with pytest.raises(ValueError):
        store.add_transaction(description="Printer paper", amount=0)

    expense = store.add_transaction(
        description="Printer paper",
        amount=250,
        transaction_type="expense",
        category="Operations",
        transaction_date=date(2024, 2, 26),
    )
    income = store.add_transaction(
        description="Bake sale",
        amount=-400,
        transaction_type="income",
    )

    assert expense.amount == -250
    assert income.amount == 400
    assert income.category == "Donations"
    assert income.status == "completed"
    assert store.list_transactions()[0].id == income.id

    flipped = store.update_transaction(expense.id, type="income")
    assert flipped.amount == 250


def test_reset_to_seed_discards_changes(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)
    for member in store.list_board_members():
        store.delete_board_member(member.id)
    assert store.list_board_members() == []

    reopened = _build_store(tmp_path)
    assert reopened.list_board_members() == []

    reopened.reset_to_seed()
    assert len(reopened.list_board_members()) == 8


def test_update_budget(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)
    budget = store.list_budgets()[0]

    store.update_budget(budget.id, spent=310000)

    reopened = _build_store(tmp_path)
    assert reopened.list_budgets()[0].spent == 310000


def test_donor_directory_search_and_notes() -> None:
    directory = DonorDirectory()
    seen: list[int] = []
    unsubscribe = directory.subscribe(lambda donors: seen.append(len(donors)))

    assert [donor.name for donor in directory.search("williams")] == ["Williams Foundation"]
    assert [donor.id for donor in directory.search("CHEN TECH")] == [2]
    assert len(directory.search("   ")) == 13

    with pytest.raises(ValueError):
        directory.add_donor(name="  ")

    added = directory.add_donor(name="Dana Lee", organization="Lee Family Trust")
    assert added.id == 14
    assert seen == [14]

    before = directory.find(added.id)
    assert directory.add_note(added.id, "   ") == before

    updated = directory.add_note(added.id, "Discussed spring gala sponsorship", when=date(2024, 3, 2))
    assert updated is not None
    assert updated.interactions[-1].summary == "Discussed spring gala sponsorship"
    assert updated.interactions[-1].type == "meeting"
    assert updated.interactions[-1].date == date(2024, 3, 2)

    assert directory.add_note(999, "Nobody home") is None

    unsubscribe()
    directory.update_profile(added.id, plans="Invite to board dinner")
    assert seen == [14, 14]
    assert directory.find(added.id).plans == "Invite to board dinner"  # type: ignore[union-attr]

    with pytest.raises(KeyError):
        directory.update_profile(999, notes="missing")


def test_format_currency_and_date_helpers() -> None:
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-28500) == "-$28,500.00"

    bounds = month_bounds(date(2024, 2, 14))
    assert bounds.start == date(2024, 2, 1)
    assert bounds.end == date(2024, 2, 29)

    assert add_years(date(2024, 2, 29), 3) == date(2027, 2, 28)


def test_reset_to_seed_restores_donors(tmp_path) -> None:  # type: ignore[no-untyped-def]
    store = _build_store(tmp_path)
    store.donors.add_donor(name="Session Donor")
    assert len(store.donors.get()) == 14

    store.reset_to_seed()

    assert len(store.donors.get()) == 13
    assert store.donors.search("session donor") == []
