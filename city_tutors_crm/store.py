"""Write-through CRUD for the CRM collections."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Any, Callable
from uuid import uuid4

from . import config
from .models import BoardMember, Budget, CalendarEvent, Donor, DonorInteraction, Transaction
from .seed import (
    seed_board_members,
    seed_budgets,
    seed_donors,
    seed_events,
    seed_transactions,
)
from .storage import JsonRepository, KeyValueStorage

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _new_id() -> str:
    return uuid4().hex


def format_currency(amount: float) -> str:
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


@dataclass(frozen=True)
class MonthRange:
    start: date
    end: date


def month_bounds(anchor: date) -> MonthRange:
    first_day = anchor.replace(day=1)
    if first_day.month == 12:
        next_month = date(first_day.year + 1, 1, 1)
    else:
        next_month = date(first_day.year, first_day.month + 1, 1)
    return MonthRange(start=first_day, end=next_month - timedelta(days=1))


def add_years(anchor: date, years: int) -> date:
    try:
        return anchor.replace(year=anchor.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year.
        return anchor.replace(year=anchor.year + years, day=28)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, datetime.min.time())


def _signed_amount(amount: float, transaction_type: str) -> float:
    if transaction_type == "expense":
        return -abs(amount)
    return abs(amount)


class DonorDirectory:
    """Shared donor collection with get/set/subscribe semantics."""

    def __init__(self, donors: list[Donor] | None = None) -> None:
        self._donors: list[Donor] = list(donors) if donors is not None else seed_donors()
        self._subscribers: list[Callable[[list[Donor]], None]] = []

    def get(self) -> list[Donor]:
        return list(self._donors)

    def set(self, donors: list[Donor]) -> None:
        self._donors = list(donors)
        for callback in list(self._subscribers):
            callback(self.get())

    def subscribe(self, callback: Callable[[list[Donor]], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def find(self, donor_id: int) -> Donor | None:
        return next((donor for donor in self._donors if donor.id == donor_id), None)

    def search(self, search_term: str = "") -> list[Donor]:
        term = search_term.strip().lower()
        if not term:
            return self.get()
        return [
            donor
            for donor in self._donors
            if term in donor.name.lower()
            or (donor.organization is not None and term in donor.organization.lower())
        ]

    def add_donor(
        self,
        name: str,
        organization: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        notes: str | None = None,
    ) -> Donor:
        clean_name = _clean(name)
        if not clean_name:
            raise ValueError("Donor name is required.")

        next_id = max((donor.id for donor in self._donors), default=0) + 1
        donor = Donor(
            id=next_id,
            name=clean_name,
            organization=_clean(organization),
            email=_clean(email) or "",
            phone=_clean(phone) or "",
            notes=_clean(notes) or "",
        )
        self.set([*self._donors, donor])
        logger.info("Added donor %s (#%s).", donor.name, donor.id)
        return donor

    def update_profile(self, donor_id: int, **changes: Any) -> Donor:
        changes.pop("id", None)
        existing = self.find(donor_id)
        if existing is None:
            raise KeyError(f"Donor {donor_id} was not found.")

        updated = replace(existing, **changes)
        self.set([updated if donor.id == donor_id else donor for donor in self._donors])
        return updated

    def add_note(self, donor_id: int, summary: str, when: date | None = None) -> Donor | None:
        clean_summary = _clean(summary)
        existing = self.find(donor_id)
        if clean_summary is None or existing is None:
            return existing

        next_id = max((row.id for row in existing.interactions), default=0) + 1
        interaction = DonorInteraction(
            id=next_id,
            date=when or date.today(),
            type="meeting",
            summary=clean_summary,
        )
        return self.update_profile(
            donor_id,
            interactions=[*existing.interactions, interaction],
        )


class CRMStore:
    """Board members, calendar events, transactions, and budgets over one storage."""

    def __init__(self, storage: KeyValueStorage, donors: DonorDirectory | None = None) -> None:
        self.storage = storage
        self.board_repository: JsonRepository[BoardMember] = JsonRepository(
            storage,
            config.BOARD_MEMBERS_KEY,
            BoardMember.from_dict,
            BoardMember.to_dict,
            seed_board_members,
        )
        self.event_repository: JsonRepository[CalendarEvent] = JsonRepository(
            storage,
            config.CALENDAR_EVENTS_KEY,
            CalendarEvent.from_dict,
            CalendarEvent.to_dict,
            seed_events,
        )
        self.transaction_repository: JsonRepository[Transaction] = JsonRepository(
            storage,
            config.TRANSACTIONS_KEY,
            Transaction.from_dict,
            Transaction.to_dict,
            seed_transactions,
        )
        self.budget_repository: JsonRepository[Budget] = JsonRepository(
            storage,
            config.BUDGETS_KEY,
            Budget.from_dict,
            Budget.to_dict,
            seed_budgets,
        )
        self.donors = donors if donors is not None else DonorDirectory()

        self._board_members: list[BoardMember] | None = None
        self._events: list[CalendarEvent] | None = None
        self._transactions: list[Transaction] | None = None
        self._budgets: list[Budget] | None = None

    def reload(self) -> None:
        self._board_members = None
        self._events = None
        self._transactions = None
        self._budgets = None

    def reset_to_seed(self) -> None:
        for key in (
            config.BOARD_MEMBERS_KEY,
            config.CALENDAR_EVENTS_KEY,
            config.TRANSACTIONS_KEY,
            config.BUDGETS_KEY,
        ):
            self.storage.remove(key)
        self.reload()
        self.donors.set(seed_donors())
        logger.info("Collections reset to sample data.")

    # Board members

    def _board(self) -> list[BoardMember]:
        if self._board_members is None:
            self._board_members = self.board_repository.load()
        return self._board_members

    def _save_board(self, members: list[BoardMember]) -> None:
        self._board_members = members
        self.board_repository.save_all(members)

    def list_board_members(self) -> list[BoardMember]:
        return list(self._board())

    def get_board_member(self, member_id: str) -> BoardMember | None:
        return next((member for member in self._board() if member.id == member_id), None)

    def add_board_member(
        self,
        name: str | None = None,
        position: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        company: str | None = None,
        title: str | None = None,
        notes: str | None = None,
        committees: list[str] | None = None,
        attendance: float | None = None,
        donation_total: float | None = None,
        status: str | None = None,
        avatar_url: str | None = None,
        today: date | None = None,
    ) -> BoardMember:
        members = self._board()
        term_start = today or date.today()

        # Seat is the append index; never reconciled after deletions.
        member = BoardMember(
            id=_new_id(),
            name=_clean(name) or "New Member",
            position=position or "member",
            seat_number=len(members),
            term_start=term_start,
            term_end=add_years(term_start, config.TERM_LENGTH_YEARS),
            attendance=config.DEFAULT_ATTENDANCE if attendance is None else attendance,
            donation_total=donation_total or 0,
            committees=list(committees or []),
            email=_clean(email) or "",
            phone=_clean(phone) or "",
            company=_clean(company) or "",
            title=_clean(title) or "",
            notes=_clean(notes) or "",
            status=status or "active",
            avatar_url=_clean(avatar_url) or "",
        )
        self._save_board([*members, member])
        logger.info("Added board member %s at seat %s.", member.name, member.seat_number)
        return member

    def update_board_member(self, member_id: str, **changes: Any) -> BoardMember:
        changes.pop("id", None)
        existing = self.get_board_member(member_id)
        if existing is None:
            raise KeyError(f"Board member {member_id} was not found.")

        updated = replace(existing, **changes)
        self._save_board(
            [updated if member.id == member_id else member for member in self._board()]
        )
        return updated

    def delete_board_member(self, member_id: str) -> bool:
        members = self._board()
        remaining = [member for member in members if member.id != member_id]
        if len(remaining) == len(members):
            return False
        self._save_board(remaining)
        logger.info("Removed board member %s.", member_id)
        return True

    # Calendar events

    def _event_list(self) -> list[CalendarEvent]:
        if self._events is None:
            self._events = self.event_repository.load()
        return self._events

    def _save_events(self, events: list[CalendarEvent]) -> None:
        self._events = events
        self.event_repository.save_all(events)

    def list_events(self) -> list[CalendarEvent]:
        return list(self._event_list())

    def get_event(self, event_id: str) -> CalendarEvent | None:
        return next((event for event in self._event_list() if event.id == event_id), None)

    def add_event(
        self,
        title: str,
        event_date: date | datetime,
        description: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        event_type: str | None = None,
        status: str | None = None,
        location: str | None = None,
        attendees: list[str] | None = None,
        priority: str | None = None,
        reminder: int | None = None,
        notes: str | None = None,
        related_donor: str | None = None,
        amount: float | None = None,
    ) -> CalendarEvent:
        clean_title = _clean(title)
        if not clean_title:
            raise ValueError("Event title is required.")

        event = CalendarEvent(
            id=_new_id(),
            title=clean_title,
            description=_clean(description) or "",
            date=_as_datetime(event_date),
            start_time=_clean(start_time) or config.DEFAULT_START_TIME,
            end_time=_clean(end_time),
            type=event_type or "meeting",
            status=status or "scheduled",
            location=_clean(location),
            attendees=list(attendees or []),
            priority=priority or "medium",
            reminder=reminder,
            notes=_clean(notes),
            related_donor=_clean(related_donor),
            amount=amount,
        )
        self._save_events([*self._event_list(), event])
        logger.info("Added event %r on %s.", event.title, event.date.date().isoformat())
        return event

    def update_event(self, event_id: str, **changes: Any) -> CalendarEvent:
        changes.pop("id", None)
        existing = self.get_event(event_id)
        if existing is None:
            raise KeyError(f"Event {event_id} was not found.")
        if "title" in changes and not _clean(changes["title"]):
            raise ValueError("Event title is required.")
        if "date" in changes:
            changes["date"] = _as_datetime(changes["date"])

        updated = replace(existing, **changes)
        self._save_events(
            [updated if event.id == event_id else event for event in self._event_list()]
        )
        return updated

    def delete_event(self, event_id: str) -> bool:
        events = self._event_list()
        remaining = [event for event in events if event.id != event_id]
        if len(remaining) == len(events):
            return False
        self._save_events(remaining)
        logger.info("Removed event %s.", event_id)
        return True

    # Transactions

    def _transaction_list(self) -> list[Transaction]:
        if self._transactions is None:
            self._transactions = self.transaction_repository.load()
        return self._transactions

    def _save_transactions(self, transactions: list[Transaction]) -> None:
        self._transactions = transactions
        self.transaction_repository.save_all(transactions)

    def list_transactions(self) -> list[Transaction]:
        return list(self._transaction_list())

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        return next(
            (row for row in self._transaction_list() if row.id == transaction_id),
            None,
        )

    def add_transaction(
        self,
        description: str,
        amount: float,
        transaction_type: str = "income",
        category: str | None = None,
        subcategory: str | None = None,
        source: str | None = None,
        recurring: bool = False,
        status: str | None = None,
        notes: str | None = None,
        transaction_date: date | datetime | None = None,
    ) -> Transaction:
        clean_description = _clean(description)
        if not clean_description:
            raise ValueError("Transaction description is required.")
        if not amount:
            raise ValueError("Transaction amount is required.")

        transaction = Transaction(
            id=_new_id(),
            date=_as_datetime(transaction_date) if transaction_date else datetime.now(),
            description=clean_description,
            amount=_signed_amount(amount, transaction_type),
            type=transaction_type,
            category=_clean(category) or config.DONATIONS_CATEGORY,
            subcategory=_clean(subcategory),
            source=_clean(source),
            recurring=recurring,
            status=status or "completed",
            notes=_clean(notes),
        )
        self._save_transactions([transaction, *self._transaction_list()])
        logger.info(
            "Recorded %s of %s: %s.",
            transaction.type,
            format_currency(abs(transaction.amount)),
            transaction.description,
        )
        return transaction

    def update_transaction(self, transaction_id: str, **changes: Any) -> Transaction:
        changes.pop("id", None)
        existing = self.get_transaction(transaction_id)
        if existing is None:
            raise KeyError(f"Transaction {transaction_id} was not found.")
        if "description" in changes and not _clean(changes["description"]):
            raise ValueError("Transaction description is required.")
        if "date" in changes:
            changes["date"] = _as_datetime(changes["date"])

        updated = replace(existing, **changes)
        updated = replace(updated, amount=_signed_amount(updated.amount, updated.type))
        self._save_transactions(
            [updated if row.id == transaction_id else row for row in self._transaction_list()]
        )
        return updated

    def delete_transaction(self, transaction_id: str) -> bool:
        transactions = self._transaction_list()
        remaining = [row for row in transactions if row.id != transaction_id]
        if len(remaining) == len(transactions):
            return False
        self._save_transactions(remaining)
        logger.info("Removed transaction %s.", transaction_id)
        return True

    # Budgets

    def _budget_list(self) -> list[Budget]:
        if self._budgets is None:
            self._budgets = self.budget_repository.load()
        return self._budgets

    def list_budgets(self) -> list[Budget]:
        return list(self._budget_list())

    def update_budget(self, budget_id: str, **changes: Any) -> Budget:
        changes.pop("id", None)
        budgets = self._budget_list()
        existing = next((row for row in budgets if row.id == budget_id), None)
        if existing is None:
            raise KeyError(f"Budget {budget_id} was not found.")

        updated = replace(existing, **changes)
        self._budgets = [updated if row.id == budget_id else row for row in budgets]
        self.budget_repository.save_all(self._budgets)
        return updated
