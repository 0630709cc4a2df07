"""Derived views recomputed from the live collections on every call."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterable

from . import config
from .calendar_grid import upcoming_events
from .models import BoardMember, Budget, CalendarEvent, Donor, Transaction
from .store import month_bounds


@dataclass(frozen=True)
class BoardStats:
    total_members: int
    average_attendance: int
    total_donations: float
    terms_expiring_soon: int


@dataclass(frozen=True)
class SeatPosition:
    x: float
    y: float


@dataclass(frozen=True)
class DonorStats:
    total_donors: int
    total_raised: float
    average_gift: float
    recent_donors: int


@dataclass(frozen=True)
class FinancialSummary:
    income: float
    expenses: float
    net_income: float
    income_change: float
    expense_change: float


@dataclass(frozen=True)
class DonationSummary:
    source: str
    amount: float
    count: int
    average_gift: float
    percentage: float


@dataclass(frozen=True)
class BudgetAnalysis:
    budget: Budget
    percentage: float
    remaining: float
    status: str


# Board


def _months_until(target: date, now: datetime) -> float:
    target_moment = datetime.combine(target, datetime.min.time())
    days = (target_moment - now).total_seconds() / 86400
    return days / config.DAYS_PER_MONTH_ESTIMATE


def board_stats(members: Iterable[BoardMember], now: datetime | None = None) -> BoardStats:
    reference = now or datetime.now()
    member_list = list(members)
    total = len(member_list)

    average_attendance = 0
    if total:
        # Half rounds up, not to even.
        average_attendance = math.floor(sum(member.attendance for member in member_list) / total + 0.5)

    expiring = 0
    for member in member_list:
        months_left = _months_until(member.term_end, reference)
        if 0 < months_left <= config.TERM_EXPIRY_WINDOW_MONTHS:
            expiring += 1

    return BoardStats(
        total_members=total,
        average_attendance=int(average_attendance),
        total_donations=sum(member.donation_total for member in member_list),
        terms_expiring_soon=expiring,
    )


def filter_board_members(members: Iterable[BoardMember], search_term: str = "") -> list[BoardMember]:
    term = search_term.strip().lower()
    if not term:
        return list(members)
    return [
        member
        for member in members
        if term in member.name.lower() or term in member.company.lower()
    ]


def seat_position(index: int, total_seats: int) -> SeatPosition:
    """Place a seat on the oval boardroom table, starting at the top."""

    angle = (index * 2 * math.pi) / max(total_seats, 1) - math.pi / 2
    return SeatPosition(
        x=config.TABLE_CENTER_X + config.TABLE_RADIUS_X * math.cos(angle),
        y=config.TABLE_CENTER_Y + config.TABLE_RADIUS_Y * math.sin(angle),
    )


def seat_layout(members: list[BoardMember]) -> list[tuple[BoardMember, SeatPosition]]:
    # Layout follows list order, not seat_number.
    total = len(members)
    return [(member, seat_position(index, total)) for index, member in enumerate(members)]


def member_profile_rows(member: BoardMember) -> list[tuple[str, str]]:
    """Labelled narrative fields for the profile panel, skipping empty ones."""

    last_interaction = (
        member.last_interaction.strftime("%b %d, %Y") if member.last_interaction else None
    )
    rows = [
        ("Background", member.background),
        ("Expertise", ", ".join(member.expertise) or None),
        ("Connections", member.connections),
        ("Personal Interests", member.personal_interests),
        ("Family", member.family_info),
        ("Giving History", member.giving_history),
        ("Board Contributions", member.board_contributions),
        ("Future Goals", member.future_goals),
        ("Preferred Contact", member.preferred_contact),
        ("Last Interaction", last_interaction),
    ]
    return [(label, value) for label, value in rows if value]


# Donors


def donor_activity(donor: Donor, today: date | None = None) -> tuple[bool, bool]:
    """Return (is_active, is_recent) based on days since the last gift."""

    if donor.last_gift_date is None:
        return False, False
    days_since = ((today or date.today()) - donor.last_gift_date).days
    return days_since < config.ACTIVE_DONOR_DAYS, days_since < config.RECENT_DONOR_DAYS


def donor_stats(donors: Iterable[Donor], today: date | None = None) -> DonorStats:
    reference = today or date.today()
    cutoff = reference - timedelta(days=config.RECENT_DONOR_DAYS)
    donor_list = list(donors)
    total_raised = sum(donor.total_given for donor in donor_list)

    return DonorStats(
        total_donors=len(donor_list),
        total_raised=total_raised,
        average_gift=total_raised / len(donor_list) if donor_list else 0.0,
        recent_donors=sum(
            1
            for donor in donor_list
            if donor.last_gift_date is not None and donor.last_gift_date > cutoff
        ),
    )


# Finances


def filter_transactions(
    transactions: Iterable[Transaction],
    period: str = "monthly",
    year: int | None = None,
    month0: int | None = None,
    search_term: str = "",
    category: str = "all",
) -> list[Transaction]:
    today = date.today()
    selected_year = today.year if year is None else year
    selected_month0 = today.month - 1 if month0 is None else month0

    filtered = [row for row in transactions if row.status == "completed"]
    if period == "monthly":
        filtered = [
            row
            for row in filtered
            if row.date.year == selected_year and row.date.month - 1 == selected_month0
        ]
    else:
        filtered = [row for row in filtered if row.date.year == selected_year]

    term = search_term.strip().lower()
    if term:
        filtered = [
            row
            for row in filtered
            if term in row.description.lower() or term in row.category.lower()
        ]

    if category != "all":
        filtered = [row for row in filtered if row.category == category]

    return sorted(filtered, key=lambda row: row.date, reverse=True)


def _income_and_expenses(transactions: Iterable[Transaction]) -> tuple[float, float]:
    income = 0.0
    expenses = 0.0
    for row in transactions:
        if row.type == "income":
            income += row.amount
        elif row.type == "expense":
            expenses += abs(row.amount)
    return income, expenses


def previous_period(period: str, year: int, month0: int) -> tuple[date, date]:
    if period == "monthly":
        if month0 == 0:
            anchor = date(year - 1, 12, 1)
        else:
            anchor = date(year, month0, 1)
        bounds = month_bounds(anchor)
        return bounds.start, bounds.end
    return date(year - 1, 1, 1), date(year - 1, 12, 31)


def _percent_change(current: float, previous: float) -> float:
    if previous <= 0:
        return 0.0
    return (current - previous) / previous * 100


def financial_summary(
    transactions: Iterable[Transaction],
    period: str = "monthly",
    year: int | None = None,
    month0: int | None = None,
    search_term: str = "",
    category: str = "all",
) -> FinancialSummary:
    today = date.today()
    selected_year = today.year if year is None else year
    selected_month0 = today.month - 1 if month0 is None else month0
    transaction_list = list(transactions)

    current = filter_transactions(
        transaction_list,
        period=period,
        year=selected_year,
        month0=selected_month0,
        search_term=search_term,
        category=category,
    )
    income, expenses = _income_and_expenses(current)

    previous_start, previous_end = previous_period(period, selected_year, selected_month0)
    previous = [
        row
        for row in transaction_list
        if row.status == "completed" and previous_start <= row.date.date() <= previous_end
    ]
    previous_income, previous_expenses = _income_and_expenses(previous)

    return FinancialSummary(
        income=income,
        expenses=expenses,
        net_income=income - expenses,
        income_change=_percent_change(income, previous_income),
        expense_change=_percent_change(expenses, previous_expenses),
    )


def donation_breakdown(transactions: Iterable[Transaction]) -> list[DonationSummary]:
    """Group donation income by subcategory. Expects already-filtered rows."""

    donations = [
        row
        for row in transactions
        if row.type == "income" and row.category == config.DONATIONS_CATEGORY
    ]
    groups: dict[str, list[float]] = {}
    for row in donations:
        groups.setdefault(row.subcategory or "Other", []).append(row.amount)

    total = sum(row.amount for row in donations)
    summaries = [
        DonationSummary(
            source=source,
            amount=sum(amounts),
            count=len(amounts),
            average_gift=sum(amounts) / len(amounts),
            percentage=(sum(amounts) / total * 100) if total > 0 else 0.0,
        )
        for source, amounts in groups.items()
    ]
    summaries.sort(key=lambda summary: summary.amount, reverse=True)
    return summaries


def budget_status(percentage: float) -> str:
    if percentage > config.BUDGET_OVER_PERCENT:
        return "over"
    if percentage > config.BUDGET_WARNING_PERCENT:
        return "warning"
    return "good"


def budget_analysis(budgets: Iterable[Budget]) -> list[BudgetAnalysis]:
    results: list[BudgetAnalysis] = []
    for budget in budgets:
        percentage = (budget.spent / budget.budgeted * 100) if budget.budgeted > 0 else 0.0
        results.append(
            BudgetAnalysis(
                budget=budget,
                percentage=percentage,
                remaining=budget.budgeted - budget.spent,
                status=budget_status(percentage),
            )
        )
    return results


# Dashboard


def dashboard_snapshot(
    transactions: Iterable[Transaction],
    events: Iterable[CalendarEvent],
    donors: Iterable[Donor],
    now: datetime | None = None,
    monthly_goal: float = config.MONTHLY_FUNDRAISING_GOAL,
) -> dict[str, Any]:
    reference = now or datetime.now()
    transaction_list = list(transactions)
    donor_list = list(donors)

    month_rows = filter_transactions(
        transaction_list,
        period="monthly",
        year=reference.year,
        month0=reference.month - 1,
    )
    month_income, month_expenses = _income_and_expenses(month_rows)
    donor_summary = donor_stats(donor_list, today=reference.date())

    recent_givers = sorted(
        (donor for donor in donor_list if donor.last_gift_date is not None),
        key=lambda donor: donor.last_gift_date,  # type: ignore[arg-type, return-value]
        reverse=True,
    )

    percent_of_goal = (month_income / monthly_goal * 100) if monthly_goal > 0 else 0.0

    return {
        "month_raised": month_income,
        "month_expenses": month_expenses,
        "monthly_goal": monthly_goal,
        "percent_of_goal": round(percent_of_goal, 1),
        "active_givers": sum(
            1 for donor in donor_list if donor_activity(donor, reference.date())[0]
        ),
        "average_gift": donor_summary.average_gift,
        "upcoming_events": upcoming_events(
            events,
            now=reference,
            limit=config.DASHBOARD_UPCOMING_COUNT,
        ),
        "recent_donors": recent_givers[: config.DASHBOARD_RECENT_DONOR_COUNT],
    }
