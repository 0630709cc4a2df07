from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from city_tutors_crm.models import Budget, Transaction
from city_tutors_crm.seed import seed_board_members, seed_donors, seed_events, seed_transactions
from city_tutors_crm.stats import (
    board_stats,
    budget_analysis,
    budget_status,
    dashboard_snapshot,
    donation_breakdown,
    donor_activity,
    donor_stats,
    filter_board_members,
    filter_transactions,
    financial_summary,
    member_profile_rows,
    previous_period,
    seat_layout,
    seat_position,
)


def _transaction(transaction_id: str, when: datetime, amount: float, **overrides) -> Transaction:  # type: ignore[no-untyped-def]
    values = {
        "id": transaction_id,
        "date": when,
        "description": f"Row {transaction_id}",
        "amount": amount,
        "type": "income" if amount > 0 else "expense",
        "category": "Donations" if amount > 0 else "Operations",
    }
    values.update(overrides)
    return Transaction(**values)


def test_income_minus_expenses_gives_net_income() -> None:
    rows = [
        _transaction("1", datetime(2024, 2, 1), 75000),
        _transaction("2", datetime(2024, 2, 3), -28500),
    ]

    summary = financial_summary(rows, period="monthly", year=2024, month0=1)

    assert summary.income == 75000
    assert summary.expenses == 28500
    assert summary.net_income == 46500


def test_summary_is_order_independent() -> None:
    rows = seed_transactions()

    forward = financial_summary(rows, period="monthly", year=2024, month0=1)
    backward = financial_summary(list(reversed(rows)), period="monthly", year=2024, month0=1)

    assert forward == backward
    assert forward.income == 158500
    assert forward.expenses == 57200


def test_filter_transactions_only_keeps_completed_rows_in_period() -> None:
    rows = [
        _transaction("1", datetime(2024, 2, 1), 500),
        _transaction("2", datetime(2024, 2, 9), 700, status="pending"),
        _transaction("3", datetime(2024, 3, 1), 900),
        _transaction("4", datetime(2024, 2, 20), -100, description="Paper supplies"),
    ]

    monthly = filter_transactions(rows, period="monthly", year=2024, month0=1)
    assert [row.id for row in monthly] == ["4", "1"]

    yearly = filter_transactions(rows, period="yearly", year=2024)
    assert {row.id for row in yearly} == {"1", "3", "4"}

    searched = filter_transactions(rows, period="yearly", year=2024, search_term="PAPER")
    assert [row.id for row in searched] == ["4"]

    by_category = filter_transactions(rows, period="yearly", year=2024, category="Donations")
    assert {row.id for row in by_category} == {"1", "3"}


def test_percent_change_against_previous_month() -> None:
    rows = [
        _transaction("1", datetime(2024, 1, 31, 18, 0), 1000),
        _transaction("2", datetime(2024, 2, 10), 1500),
        _transaction("3", datetime(2023, 12, 5), 400),
    ]

    february = financial_summary(rows, period="monthly", year=2024, month0=1)
    assert february.income_change == pytest.approx(50.0)
    assert february.expense_change == 0

    january = financial_summary(rows, period="monthly", year=2024, month0=0)
    assert january.income_change == pytest.approx(150.0)

    assert previous_period("monthly", 2024, 0) == (date(2023, 12, 1), date(2023, 12, 31))
    assert previous_period("yearly", 2024, 5) == (date(2023, 1, 1), date(2023, 12, 31))


def test_donation_breakdown_groups_by_subcategory() -> None:
    rows = filter_transactions(seed_transactions(), period="monthly", year=2024, month0=1)
    rows.append(_transaction("x", datetime(2024, 2, 29), 1500))

    breakdown = donation_breakdown(rows)
    by_source = {row.source: row for row in breakdown}

    assert breakdown[0].source == "Major Gifts"
    assert by_source["Corporate"].amount == 60000
    assert by_source["Corporate"].count == 2
    assert by_source["Corporate"].average_gift == 30000
    assert by_source["Other"].amount == 1500
    assert sum(row.percentage for row in breakdown) == pytest.approx(100.0)
    assert donation_breakdown([]) == []


def test_budget_status_thresholds() -> None:
    assert budget_status(50) == "good"
    assert budget_status(90) == "good"
    assert budget_status(95) == "warning"
    assert budget_status(100) == "warning"
    assert budget_status(120) == "over"

    results = budget_analysis(
        [
            Budget(id="1", category="Programs", budgeted=1000, spent=1200, period="yearly", year=2024),
            Budget(id="2", category="Events", budgeted=0, spent=50, period="yearly", year=2024),
        ]
    )
    assert results[0].status == "over"
    assert results[0].remaining == -200
    assert results[1].percentage == 0


def test_board_stats_and_search() -> None:
    members = seed_board_members()

    stats = board_stats(members, now=datetime(2025, 9, 1))

    assert stats.total_members == 8
    assert stats.average_attendance == 88
    assert stats.total_donations == 233000
    # Only terms ending Dec 31, 2025 fall within the next six months.
    assert stats.terms_expiring_soon == 2

    assert board_stats([]).average_attendance == 0
    assert [member.name for member in filter_board_members(members, "chen")] == ["Michael Chen"]


def test_seat_positions_start_at_top_of_table() -> None:
    top = seat_position(0, 8)
    assert top.x == pytest.approx(400)
    assert top.y == pytest.approx(70)

    right = seat_position(2, 8)
    assert right.x == pytest.approx(680)
    assert right.y == pytest.approx(250)

    layout = seat_layout(seed_board_members()[1:])
    assert len(layout) == 7
    assert layout[0][1] == seat_position(0, 7)


def test_donor_stats_and_activity() -> None:
    donors = seed_donors()
    today = date(2024, 2, 15)

    stats = donor_stats(donors, today=today)

    assert stats.total_donors == 13
    assert stats.total_raised == sum(donor.total_given for donor in donors)
    assert stats.average_gift == pytest.approx(stats.total_raised / 13)
    # Robert Thompson last gave on Oct 30, 2023.
    assert stats.recent_donors == 12

    assert donor_activity(donors[0], today=date(2025, 2, 1)) == (False, False)
    assert donor_activity(donors[0], today=date(2024, 3, 1)) == (True, True)
    assert donor_stats([]).average_gift == 0


def test_dashboard_snapshot_uses_live_data() -> None:
    snapshot = dashboard_snapshot(
        seed_transactions(),
        seed_events(),
        seed_donors(),
        now=datetime(2024, 2, 16, 9, 0),
        monthly_goal=150000,
    )

    assert snapshot["month_raised"] == 158500
    assert snapshot["month_expenses"] == 57200
    assert snapshot["percent_of_goal"] == 105.7
    assert snapshot["active_givers"] == 13
    assert len(snapshot["upcoming_events"]) == 3
    assert [donor.name for donor in snapshot["recent_donors"]] == [
        "Tech Innovators Inc.",
        "Green Energy Solutions",
        "Michael Chen",
    ]


def test_average_attendance_rounds_half_up() -> None:
    chair = seed_board_members()[0]
    members = [replace(chair, attendance=84), replace(chair, id="x", attendance=85)]

    assert board_stats(members).average_attendance == 85
    assert board_stats([replace(chair, attendance=86), replace(chair, attendance=87)]).average_attendance == 87


def test_member_profile_rows_include_personal_details() -> None:
    chair = seed_board_members()[0]

    rows = dict(member_profile_rows(chair))

    assert rows["Personal Interests"] == "Marathon runner and youth basketball coach."
    assert rows["Family"].startswith("Married with two daughters")
    assert rows["Preferred Contact"] == "phone"
    assert rows["Last Interaction"] == "Jan 10, 2024"

    bare = replace(chair, background=None, expertise=[], last_interaction=None, preferred_contact=None)
    labels = [label for label, _ in member_profile_rows(bare)]
    assert "Background" not in labels
    assert "Expertise" not in labels
    assert "Last Interaction" not in labels
