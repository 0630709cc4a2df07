"""Record types for board members, events, transactions, budgets, and donors."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any


BOARD_POSITIONS = ["chair", "vice-chair", "treasurer", "secretary", "member"]
BOARD_STATUSES = ["active", "inactive", "emeritus"]
CONTACT_PREFERENCES = ["email", "phone", "text", "in-person"]

EVENT_TYPES = [
    "meeting",
    "call",
    "deadline",
    "event",
    "donation",
    "volunteer",
    "board",
    "fundraiser",
]
EVENT_STATUSES = ["scheduled", "completed", "cancelled"]
EVENT_PRIORITIES = ["low", "medium", "high"]

TRANSACTION_TYPES = ["income", "expense"]
TRANSACTION_STATUSES = ["pending", "completed", "cancelled"]
TRANSACTION_CATEGORIES = [
    "Donations",
    "Grants",
    "Events",
    "Personnel",
    "Programs",
    "Operations",
    "Fundraising",
    "Administration",
]

BUDGET_PERIODS = ["monthly", "quarterly", "yearly"]
INTERACTION_TYPES = ["call", "email", "meeting", "donation"]
CHAT_ROLES = ["user", "assistant"]


def _date_to_iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    return date.fromisoformat(value[:10])


def _parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value)


@dataclass
class BoardMember:
    id: str
    name: str
    position: str
    seat_number: int
    term_start: date
    term_end: date
    attendance: float
    donation_total: float
    committees: list[str] = field(default_factory=list)
    email: str = ""
    phone: str = ""
    company: str = ""
    title: str = ""
    notes: str = ""
    status: str = "active"
    avatar_url: str = ""
    background: str | None = None
    expertise: list[str] = field(default_factory=list)
    connections: str | None = None
    personal_interests: str | None = None
    family_info: str | None = None
    giving_history: str | None = None
    board_contributions: str | None = None
    future_goals: str | None = None
    last_interaction: date | None = None
    preferred_contact: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["term_start"] = _date_to_iso(self.term_start)
        data["term_end"] = _date_to_iso(self.term_end)
        data["last_interaction"] = _date_to_iso(self.last_interaction)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardMember:
        values = dict(data)
        values["term_start"] = _parse_date(data["term_start"])
        values["term_end"] = _parse_date(data["term_end"])
        values["last_interaction"] = _parse_date(data.get("last_interaction"))
        values["committees"] = list(data.get("committees") or [])
        values["expertise"] = list(data.get("expertise") or [])
        return cls(**values)


@dataclass
class CalendarEvent:
    id: str
    title: str
    date: datetime
    start_time: str
    type: str = "meeting"
    status: str = "scheduled"
    priority: str = "medium"
    description: str = ""
    end_time: str | None = None
    location: str | None = None
    attendees: list[str] = field(default_factory=list)
    reminder: int | None = None
    notes: str | None = None
    related_donor: str | None = None
    amount: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CalendarEvent:
        values = dict(data)
        values["date"] = _parse_datetime(data["date"])
        values["attendees"] = list(data.get("attendees") or [])
        return cls(**values)


@dataclass
class Transaction:
    id: str
    date: datetime
    description: str
    amount: float
    type: str
    category: str
    recurring: bool = False
    status: str = "completed"
    subcategory: str | None = None
    source: str | None = None
    donor_id: str | None = None
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        values = dict(data)
        values["date"] = _parse_datetime(data["date"])
        return cls(**values)


@dataclass
class Budget:
    id: str
    category: str
    budgeted: float
    spent: float
    period: str
    year: int
    month: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Budget:
        return cls(**data)


@dataclass
class DonorInteraction:
    id: int
    date: date
    type: str
    summary: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["date"] = _date_to_iso(self.date)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DonorInteraction:
        values = dict(data)
        values["date"] = _parse_date(data["date"])
        return cls(**values)


@dataclass
class Donor:
    id: int
    name: str
    organization: str | None = None
    email: str = ""
    phone: str = ""
    total_given: float = 0
    last_gift_date: date | None = None
    last_gift_amount: float | None = None
    notes: str = ""
    plans: str = ""
    thoughts: str = ""
    interactions: list[DonorInteraction] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["last_gift_date"] = _date_to_iso(self.last_gift_date)
        data["interactions"] = [interaction.to_dict() for interaction in self.interactions]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Donor:
        values = dict(data)
        values["last_gift_date"] = _parse_date(data.get("last_gift_date"))
        values["interactions"] = [
            DonorInteraction.from_dict(row) for row in data.get("interactions") or []
        ]
        return cls(**values)


@dataclass
class ChatMessage:
    role: str
    content: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatMessage:
        return cls(
            role=data["role"],
            content=data["content"],
            timestamp=_parse_datetime(data["timestamp"]),
        )
