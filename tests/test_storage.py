from __future__ import annotations

import json
from datetime import date

from city_tutors_crm import config
from city_tutors_crm.models import BoardMember, Budget, CalendarEvent, Transaction
from city_tutors_crm.seed import seed_board_members, seed_events, seed_transactions
from city_tutors_crm.storage import JsonRepository, MemoryKeyValueStorage, SQLiteKeyValueStorage


def _budget_repository(storage, seed=None) -> JsonRepository[Budget]:  # type: ignore[no-untyped-def]
    return JsonRepository(
        storage,
        config.BUDGETS_KEY,
        Budget.from_dict,
        Budget.to_dict,
        seed,
    )


def _sample_budget() -> Budget:
    return Budget(
        id="b1",
        category="Programs",
        budgeted=1000,
        spent=250,
        period="monthly",
        year=2024,
        month=2,
    )


def test_sqlite_storage_round_trip(tmp_path) -> None:  # type: ignore[no-untyped-def]
    storage = SQLiteKeyValueStorage(tmp_path / "crm_test.db")
    storage.init_db()

    assert storage.get("missing") is None

    storage.set("alpha", "1")
    storage.set("alpha", "2")
    storage.set("beta", "3")

    assert storage.get("alpha") == "2"
    assert storage.keys() == ["alpha", "beta"]

    storage.remove("alpha")
    storage.remove("never-set")
    assert storage.get("alpha") is None
    assert storage.keys() == ["beta"]


def test_repository_seeds_missing_key_and_writes_it_back() -> None:
    storage = MemoryKeyValueStorage()
    repository = _budget_repository(storage, lambda: [_sample_budget()])

    loaded = repository.load()

    assert loaded == [_sample_budget()]
    assert json.loads(storage.get(config.BUDGETS_KEY) or "[]")[0]["id"] == "b1"


def test_repository_reseeds_malformed_payload() -> None:
    storage = MemoryKeyValueStorage({config.BUDGETS_KEY: "{not json"})
    repository = _budget_repository(storage, lambda: [_sample_budget()])

    assert repository.load() == [_sample_budget()]

    storage.set(config.BUDGETS_KEY, json.dumps({"id": "not-a-list"}))
    assert repository.load() == [_sample_budget()]

    storage.set(config.BUDGETS_KEY, json.dumps([{"category": "missing fields"}]))
    assert repository.load() == [_sample_budget()]


def test_repository_persists_empty_collection() -> None:
    storage = MemoryKeyValueStorage()
    repository = _budget_repository(storage, lambda: [_sample_budget()])

    repository.load()
    repository.save_all([])

    assert storage.get(config.BUDGETS_KEY) == "[]"
    assert repository.load() == []


def test_repository_without_seed_starts_empty(tmp_path) -> None:  # type: ignore[no-untyped-def]
    storage = SQLiteKeyValueStorage(tmp_path / "crm_test.db")
    storage.init_db()
    repository = _budget_repository(storage)

    assert repository.load() == []

    repository.save_all([_sample_budget()])
    assert repository.load() == [_sample_budget()]


def test_dates_survive_serialization() -> None:
    storage = MemoryKeyValueStorage()
    repository: JsonRepository[BoardMember] = JsonRepository(
        storage,
        config.BOARD_MEMBERS_KEY,
        BoardMember.from_dict,
        BoardMember.to_dict,
        seed_board_members,
    )
    repository.load()

    reloaded = repository.load()
    chair = next(member for member in reloaded if member.position == "chair")
    assert chair.term_end == date(2025, 12, 31)
    assert isinstance(chair.term_start, date)


def test_collections_reload_identically_from_sqlite(tmp_path) -> None:  # type: ignore[no-untyped-def]
    storage = SQLiteKeyValueStorage(tmp_path / "crm_test.db")
    storage.init_db()
    board: JsonRepository[BoardMember] = JsonRepository(
        storage, config.BOARD_MEMBERS_KEY, BoardMember.from_dict, BoardMember.to_dict
    )
    events: JsonRepository[CalendarEvent] = JsonRepository(
        storage, config.CALENDAR_EVENTS_KEY, CalendarEvent.from_dict, CalendarEvent.to_dict
    )
    transactions: JsonRepository[Transaction] = JsonRepository(
        storage, config.TRANSACTIONS_KEY, Transaction.from_dict, Transaction.to_dict
    )

    board.save_all(seed_board_members())
    events.save_all(seed_events())
    transactions.save_all(seed_transactions())

    assert board.load() == seed_board_members()
    assert events.load() == seed_events()
    assert transactions.load() == seed_transactions()
    assert [event.date for event in events.load()] == [event.date for event in seed_events()]
