"""Data and helpers for the City Tutors CRM app."""

from .assistant import AssistantSession, MockAssistant
from .calendar_grid import build_month_grid, upcoming_events
from .storage import JsonRepository, MemoryKeyValueStorage, SQLiteKeyValueStorage
from .store import CRMStore, DonorDirectory, format_currency, month_bounds

__all__ = [
    "AssistantSession",
    "build_month_grid",
    "CRMStore",
    "DonorDirectory",
    "format_currency",
    "JsonRepository",
    "MemoryKeyValueStorage",
    "MockAssistant",
    "month_bounds",
    "SQLiteKeyValueStorage",
    "upcoming_events",
]
