"""Month grid generation and per-day event bucketing.

Months are zero-indexed here (0 = January) and weekdays start on Sunday
(0 = Sunday ... 6 = Saturday), which is how the calendar page counts them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable

from . import config
from .models import CalendarEvent

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class DayCell:
    day: int | None
    date: date | None = None
    events: tuple[CalendarEvent, ...] = field(default_factory=tuple)

    @property
    def is_blank(self) -> bool:
        return self.day is None

    @property
    def visible_events(self) -> tuple[CalendarEvent, ...]:
        return self.events[: config.DAY_CELL_VISIBLE_EVENTS]

    @property
    def overflow_count(self) -> int:
        return max(0, len(self.events) - config.DAY_CELL_VISIBLE_EVENTS)


@dataclass(frozen=True)
class CalendarStats:
    total_events: int
    this_week: int
    upcoming: int
    overdue: int


def shift_month(year: int, month0: int, delta: int) -> tuple[int, int]:
    absolute = year * 12 + month0 + delta
    return absolute // 12, absolute % 12


def days_in_month(year: int, month0: int) -> int:
    # Day 0 of the following month is the last day of this one.
    next_year, next_month0 = shift_month(year, month0, 1)
    last_day = date(next_year, next_month0 + 1, 1) - timedelta(days=1)
    return last_day.day


def first_weekday(year: int, month0: int) -> int:
    # date.weekday() is Monday-based; shift so Sunday is 0.
    return (date(year, month0 + 1, 1).weekday() + 1) % 7


def is_same_day(left: date, right: date) -> bool:
    return (
        left.year == right.year
        and left.month == right.month
        and left.day == right.day
    )


def events_for_date(events: Iterable[CalendarEvent], day: date) -> list[CalendarEvent]:
    return [event for event in events if is_same_day(event.date, day)]


def build_month_grid(
    year: int,
    month0: int,
    events: Iterable[CalendarEvent] = (),
) -> list[DayCell]:
    event_list = list(events)
    cells = [DayCell(day=None) for _ in range(first_weekday(year, month0))]

    for day_number in range(1, days_in_month(year, month0) + 1):
        cell_date = date(year, month0 + 1, day_number)
        cells.append(
            DayCell(
                day=day_number,
                date=cell_date,
                events=tuple(events_for_date(event_list, cell_date)),
            )
        )
    return cells


def grid_weeks(cells: list[DayCell]) -> list[list[DayCell]]:
    """Split cells into rows of seven, padding the last row with blanks."""

    padded = list(cells)
    while len(padded) % 7:
        padded.append(DayCell(day=None))
    return [padded[index : index + 7] for index in range(0, len(padded), 7)]


def upcoming_events(
    events: Iterable[CalendarEvent],
    now: datetime | None = None,
    limit: int = config.UPCOMING_EVENTS_LIMIT,
) -> list[CalendarEvent]:
    reference = now or datetime.now()
    candidates = [
        event
        for event in events
        if event.date >= reference and event.status != "cancelled"
    ]
    candidates.sort(key=lambda event: event.date)
    return candidates[:limit]


def week_bounds(now: datetime) -> tuple[datetime, datetime]:
    days_since_sunday = (now.weekday() + 1) % 7
    week_start = datetime.combine(now.date() - timedelta(days=days_since_sunday), datetime.min.time())
    week_end = week_start + timedelta(days=7) - timedelta(microseconds=1)
    return week_start, week_end


def calendar_stats(
    events: Iterable[CalendarEvent],
    now: datetime | None = None,
) -> CalendarStats:
    reference = now or datetime.now()
    event_list = list(events)
    week_start, week_end = week_bounds(reference)

    return CalendarStats(
        total_events=len(event_list),
        this_week=sum(1 for event in event_list if week_start <= event.date <= week_end),
        upcoming=len(upcoming_events(event_list, now=reference)),
        overdue=sum(
            1
            for event in event_list
            if event.date < reference
            and event.status == "scheduled"
            and event.type == "deadline"
        ),
    )


def month_label(year: int, month0: int) -> str:
    return f"{MONTH_NAMES[month0]} {year}"
