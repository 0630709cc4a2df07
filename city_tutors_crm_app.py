"""Streamlit app for board, donor, calendar, and finance management."""

from __future__ import annotations

import html
import logging
import time
from datetime import date, datetime

import pandas as pd
import streamlit as st

from city_tutors_crm import (
    AssistantSession,
    CRMStore,
    DonorDirectory,
    SQLiteKeyValueStorage,
    build_month_grid,
    format_currency,
    upcoming_events,
)
from city_tutors_crm import config
from city_tutors_crm.calendar_grid import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    calendar_stats,
    events_for_date,
    grid_weeks,
    month_label,
    shift_month,
)
from city_tutors_crm.export import export_filename, transactions_to_csv_bytes
from city_tutors_crm.models import (
    BOARD_POSITIONS,
    BOARD_STATUSES,
    EVENT_PRIORITIES,
    EVENT_STATUSES,
    EVENT_TYPES,
    TRANSACTION_CATEGORIES,
    TRANSACTION_STATUSES,
    TRANSACTION_TYPES,
    BoardMember,
    CalendarEvent,
)
from city_tutors_crm.stats import (
    board_stats,
    budget_analysis,
    dashboard_snapshot,
    donation_breakdown,
    donor_activity,
    donor_stats,
    filter_board_members,
    filter_transactions,
    financial_summary,
    member_profile_rows,
    seat_layout,
)

logger = logging.getLogger(__name__)

EVENT_TYPE_COLORS = {
    "meeting": "#3b82f6",
    "call": "#14b8a6",
    "deadline": "#ef4444",
    "event": "#a855f7",
    "donation": "#10b981",
    "volunteer": "#f97316",
    "board": "#eab308",
    "fundraiser": "#ec4899",
}

POSITION_COLORS = {
    "chair": "#facc15",
    "vice-chair": "#60a5fa",
    "treasurer": "#34d399",
    "secretary": "#c084fc",
    "member": "#9ca3af",
}


@st.cache_resource
def _get_storage() -> SQLiteKeyValueStorage:
    storage = SQLiteKeyValueStorage(config.DB_PATH)
    storage.init_db()
    logger.info("Using CRM database at %s.", config.DB_PATH)
    return storage


@st.cache_resource
def _get_store() -> CRMStore:
    return CRMStore(_get_storage(), donors=DonorDirectory())


def _inject_styles() -> None:
    st.markdown(
        """
        <style>
          :root {
            --ct-emerald-600: #059669;
            --ct-emerald-500: #10b981;
            --ct-teal-500: #14b8a6;
            --ct-slate-900: #0f172a;
            --ct-slate-700: #334155;
            --ct-card: #ffffff;
            --ct-border: #d1d5db;
          }

          .crm-hero {
            background: linear-gradient(124deg, var(--ct-emerald-600), var(--ct-teal-500));
            border-radius: 18px;
            color: #ffffff;
            padding: 1.2rem 1.25rem;
            box-shadow: 0 16px 30px rgba(5, 150, 105, 0.28);
            margin-bottom: 1rem;
          }

          .crm-hero h1,
          .crm-hero p {
            color: #ffffff !important;
            margin: 0;
          }

          .crm-hero p {
            margin-top: 0.5rem;
            font-weight: 500;
            opacity: 0.93;
          }

          .metric-card {
            border-radius: 14px;
            border: 1px solid var(--ct-border);
            background: var(--ct-card);
            box-shadow: 0 6px 14px rgba(15, 23, 42, 0.06);
            padding: 0.75rem 0.8rem;
            min-height: 104px;
          }

          .metric-label {
            margin: 0;
            color: var(--ct-slate-700);
            font-weight: 600;
            font-size: 0.84rem;
          }

          .metric-value {
            margin: 0.3rem 0 0;
            color: var(--ct-slate-900);
            font-size: 1.45rem;
            font-weight: 700;
          }

          .metric-sub {
            margin: 0.4rem 0 0;
            color: #64748b;
            font-size: 0.82rem;
          }

          .section-note {
            color: #555453;
            font-weight: 500;
            margin-top: -0.2rem;
            margin-bottom: 0.8rem;
          }

          table.crm-calendar {
            width: 100%;
            border-collapse: collapse;
            table-layout: fixed;
          }

          table.crm-calendar th {
            padding: 0.3rem;
            font-size: 0.8rem;
            color: var(--ct-slate-700);
          }

          table.crm-calendar td {
            border: 1px solid var(--ct-border);
            height: 92px;
            vertical-align: top;
            padding: 0.3rem;
            font-size: 0.78rem;
          }

          table.crm-calendar td.today {
            background: rgba(16, 185, 129, 0.12);
            border-color: var(--ct-emerald-500);
          }

          table.crm-calendar td.selected {
            background: rgba(59, 130, 246, 0.12);
          }

          .cal-event {
            color: #ffffff;
            border-radius: 4px;
            padding: 1px 4px;
            margin-top: 2px;
            white-space: nowrap;
            overflow: hidden;
            text-overflow: ellipsis;
          }

          .cal-more {
            color: #64748b;
            margin-top: 2px;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _render_metric_card(title: str, value: str, subtitle: str) -> None:
    st.markdown(
        f"""
        <div class="metric-card">
          <p class="metric-label">{html.escape(title)}</p>
          <p class="metric-value">{html.escape(value)}</p>
          <p class="metric-sub">{html.escape(subtitle)}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _hero() -> None:
    st.markdown(
        """
        <div class="crm-hero">
          <h1>City Tutors CRM</h1>
          <p>Board, donors, calendar, and finances for one nonprofit team, stored locally.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _section_note(text: str) -> None:
    st.markdown(f"<p class='section-note'>{html.escape(text)}</p>", unsafe_allow_html=True)


def _table_or_info(frame: pd.DataFrame, empty_message: str) -> None:
    if frame.empty:
        st.info(empty_message)
        return
    st.dataframe(frame, use_container_width=True, hide_index=True)


def _format_day(value: date) -> str:
    return value.strftime("%b %d, %Y")


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _confirm_delete(kind: str, record_id: str, label: str) -> bool:
    """Two-step delete: the first click arms, the second confirms."""

    pending_key = f"pending-delete-{kind}"
    if st.session_state.get(pending_key) != record_id:
        if st.button(f"Delete {label}", key=f"delete-{kind}-{record_id}"):
            st.session_state[pending_key] = record_id
            st.rerun()
        return False

    st.warning(f"Are you sure you want to delete {label}? This cannot be undone.")
    confirm_col, cancel_col = st.columns(2)
    with confirm_col:
        confirmed = st.button("Confirm Delete", key=f"confirm-{kind}-{record_id}")
    with cancel_col:
        if st.button("Cancel", key=f"cancel-{kind}-{record_id}"):
            st.session_state.pop(pending_key, None)
            st.rerun()
    if confirmed:
        st.session_state.pop(pending_key, None)
    return confirmed


def render_dashboard(store: CRMStore) -> None:
    snapshot = dashboard_snapshot(
        store.list_transactions(),
        store.list_events(),
        store.donors.get(),
    )

    st.markdown(f"### Good {'morning' if datetime.now().hour < 12 else 'afternoon'}")
    _section_note(f"Here's what needs your attention today, {_format_day(date.today())}.")

    metric_columns = st.columns(4)
    with metric_columns[0]:
        _render_metric_card(
            "Monthly Raised",
            format_currency(snapshot["month_raised"]),
            f"{snapshot['percent_of_goal']}% of {format_currency(snapshot['monthly_goal'])} goal",
        )
    with metric_columns[1]:
        _render_metric_card(
            "Monthly Expenses",
            format_currency(snapshot["month_expenses"]),
            "Completed transactions this month",
        )
    with metric_columns[2]:
        _render_metric_card(
            "Active Givers",
            str(snapshot["active_givers"]),
            "Gave within the last year",
        )
    with metric_columns[3]:
        _render_metric_card(
            "Average Gift",
            format_currency(snapshot["average_gift"]),
            "Lifetime giving per donor",
        )

    st.progress(min(snapshot["percent_of_goal"], 100.0) / 100)

    left, right = st.columns(2, gap="large")
    with left:
        st.markdown("#### Upcoming Events")
        events_df = pd.DataFrame(
            [
                {
                    "Date": _format_day(event.date),
                    "Time": event.start_time,
                    "Title": event.title,
                    "Type": event.type,
                }
                for event in snapshot["upcoming_events"]
            ]
        )
        _table_or_info(events_df, "No upcoming events scheduled.")

    with right:
        st.markdown("#### Recent Donors")
        donors_df = pd.DataFrame(
            [
                {
                    "Name": donor.name,
                    "Organization": donor.organization or "-",
                    "Last Gift": format_currency(donor.last_gift_amount or 0),
                    "Date": _format_day(donor.last_gift_date) if donor.last_gift_date else "-",
                    "Total Given": format_currency(donor.total_given),
                }
                for donor in snapshot["recent_donors"]
            ]
        )
        _table_or_info(donors_df, "No donor gifts recorded yet.")


def render_donors_tab(store: CRMStore) -> None:
    st.markdown("### Donor Network")
    _section_note("Search and manage your donor relationships.")

    directory = store.donors
    summary = donor_stats(directory.get())
    metric_columns = st.columns(4)
    with metric_columns[0]:
        _render_metric_card("Total Donors", str(summary.total_donors), "In the directory")
    with metric_columns[1]:
        _render_metric_card("Total Raised", format_currency(summary.total_raised), "Lifetime giving")
    with metric_columns[2]:
        _render_metric_card("Average Gift", format_currency(summary.average_gift), "Per donor")
    with metric_columns[3]:
        _render_metric_card("Recent Donors", str(summary.recent_donors), "Gave in the last 90 days")

    left, right = st.columns([1, 1.4], gap="large")

    with left:
        search_term = st.text_input(
            "Search Donors",
            placeholder="Search donors by name or organization...",
        )
        matches = directory.search(search_term)
        directory_df = pd.DataFrame(
            [
                {
                    "ID": donor.id,
                    "Name": donor.name,
                    "Organization": donor.organization or "-",
                    "Total Given": format_currency(donor.total_given),
                    "Status": "Recent" if donor_activity(donor)[1] else (
                        "Active" if donor_activity(donor)[0] else "Lapsed"
                    ),
                }
                for donor in matches
            ]
        )
        st.markdown(f"#### All Donors ({len(matches)})")
        _table_or_info(directory_df, "No donors matched your search.")

        with st.expander("Add New Donor"):
            with st.form("donor-create-form", clear_on_submit=True):
                name = st.text_input("Name *")
                organization = st.text_input("Organization")
                email = st.text_input("Email")
                phone = st.text_input("Phone")
                notes = st.text_area("Notes", height=80)
                if st.form_submit_button("Create Donor", use_container_width=True):
                    try:
                        directory.add_donor(
                            name=name,
                            organization=organization,
                            email=email,
                            phone=phone,
                            notes=notes,
                        )
                        st.success("Donor created.")
                        st.rerun()
                    except ValueError as exc:
                        st.error(str(exc))

    with right:
        if not matches:
            st.info("Select a donor to view their profile.")
            return

        donor_map = {donor.id: donor for donor in matches}
        selected_id = st.selectbox(
            "Open Donor",
            options=list(donor_map.keys()),
            format_func=lambda donor_id: donor_map[donor_id].name,
        )
        selected = donor_map[selected_id]

        profile_cols = st.columns(3)
        with profile_cols[0]:
            st.metric("Total Given", format_currency(selected.total_given))
        with profile_cols[1]:
            st.metric("Last Gift", format_currency(selected.last_gift_amount or 0))
        with profile_cols[2]:
            st.metric(
                "Last Gift Date",
                _format_day(selected.last_gift_date) if selected.last_gift_date else "-",
            )
        st.caption(f"Contact: {selected.email or '-'} | {selected.phone or '-'}")

        with st.form(f"donor-profile-{selected.id}"):
            notes = st.text_area("Notes", value=selected.notes, height=90)
            plans = st.text_area("Plans", value=selected.plans, height=70)
            thoughts = st.text_area("Thoughts", value=selected.thoughts, height=70)
            if st.form_submit_button("Save Profile", use_container_width=True):
                directory.update_profile(selected.id, notes=notes, plans=plans, thoughts=thoughts)
                st.success("Profile saved.")
                st.rerun()

        st.markdown("##### Interaction History")
        history_df = pd.DataFrame(
            [
                {
                    "Date": _format_day(row.date),
                    "Type": row.type,
                    "Summary": row.summary,
                }
                for row in sorted(selected.interactions, key=lambda row: row.date, reverse=True)
            ]
        )
        _table_or_info(history_df, "No interactions recorded yet.")

        with st.form(f"donor-note-{selected.id}", clear_on_submit=True):
            new_note = st.text_input("Add Note")
            if st.form_submit_button("Add Note"):
                directory.add_note(selected.id, new_note)
                st.rerun()


def _boardroom_svg(members: list[BoardMember], selected_id: str | None) -> str:
    pieces = [
        '<svg viewBox="0 0 800 500" width="100%" xmlns="http://www.w3.org/2000/svg">',
        '<ellipse cx="400" cy="250" rx="200" ry="110" fill="#78350f" stroke="#451a03" stroke-width="4"/>',
        '<text x="400" y="256" text-anchor="middle" fill="#fef3c7" font-size="20">Boardroom</text>',
    ]
    for member, position in seat_layout(members):
        color = POSITION_COLORS.get(member.position, "#9ca3af")
        stroke = "#10b981" if member.id == selected_id else "#1f2937"
        initials = "".join(part[0] for part in member.name.split()[:2]).upper()
        pieces.append(
            f'<circle cx="{position.x:.1f}" cy="{position.y:.1f}" r="30" fill="{color}" '
            f'stroke="{stroke}" stroke-width="4"/>'
        )
        pieces.append(
            f'<text x="{position.x:.1f}" y="{position.y + 6:.1f}" text-anchor="middle" '
            f'font-size="16" fill="#111827">{html.escape(initials)}</text>'
        )
        pieces.append(
            f'<text x="{position.x:.1f}" y="{position.y + 48:.1f}" text-anchor="middle" '
            f'font-size="12" fill="#374151">{html.escape(member.name)}</text>'
        )
    pieces.append("</svg>")
    return "".join(pieces)


def _board_member_form(key: str, member: BoardMember | None = None) -> dict | None:
    with st.form(key, clear_on_submit=member is None):
        first_col, second_col = st.columns(2)
        with first_col:
            name = st.text_input("Name", value=member.name if member else "")
            position = st.selectbox(
                "Position",
                BOARD_POSITIONS,
                index=BOARD_POSITIONS.index(member.position) if member else BOARD_POSITIONS.index("member"),
            )
            email = st.text_input("Email", value=member.email if member else "")
            phone = st.text_input("Phone", value=member.phone if member else "")
            company = st.text_input("Company", value=member.company if member else "")
            title = st.text_input("Title", value=member.title if member else "")
        with second_col:
            attendance = st.number_input(
                "Attendance %",
                value=float(member.attendance if member else config.DEFAULT_ATTENDANCE),
                step=1.0,
            )
            donation_total = st.number_input(
                "Donation Total",
                value=float(member.donation_total if member else 0),
                step=500.0,
            )
            committees = st.text_input(
                "Committees (comma separated)",
                value=", ".join(member.committees) if member else "",
            )
            status = st.selectbox(
                "Status",
                BOARD_STATUSES,
                index=BOARD_STATUSES.index(member.status) if member else 0,
            )
            notes = st.text_area("Notes", value=member.notes if member else "", height=90)

        submitted = st.form_submit_button(
            "Save Changes" if member else "Add Member",
            use_container_width=True,
        )
    if not submitted:
        return None
    return {
        "name": name,
        "position": position,
        "email": email,
        "phone": phone,
        "company": company,
        "title": title,
        "attendance": attendance,
        "donation_total": donation_total,
        "committees": _split_list(committees),
        "status": status,
        "notes": notes,
    }


def render_board_tab(store: CRMStore) -> None:
    st.markdown("### Board of Directors")
    _section_note("Boardroom seating, terms, giving, and member profiles.")

    members = store.list_board_members()
    stats = board_stats(members)
    metric_columns = st.columns(4)
    with metric_columns[0]:
        _render_metric_card("Board Members", str(stats.total_members), "Seated members")
    with metric_columns[1]:
        _render_metric_card("Avg Attendance", f"{stats.average_attendance}%", "Meeting attendance")
    with metric_columns[2]:
        _render_metric_card("Board Giving", format_currency(stats.total_donations), "Cumulative donations")
    with metric_columns[3]:
        _render_metric_card("Terms Expiring", str(stats.terms_expiring_soon), "Within 6 months")

    search_term = st.text_input("Search Board", placeholder="Name or company")
    visible = filter_board_members(members, search_term)
    member_map = {member.id: member for member in visible}

    selected_id = None
    if member_map:
        selected_id = st.selectbox(
            "Selected Member",
            options=list(member_map.keys()),
            format_func=lambda member_id: (
                f"{member_map[member_id].name} ({member_map[member_id].position}, "
                f"seat {member_map[member_id].seat_number})"
            ),
        )

    st.markdown(_boardroom_svg(members, selected_id), unsafe_allow_html=True)

    roster_df = pd.DataFrame(
        [
            {
                "Seat": member.seat_number,
                "Name": member.name,
                "Position": member.position,
                "Company": member.company or "-",
                "Term Ends": _format_day(member.term_end),
                "Attendance": f"{member.attendance:.0f}%",
                "Donations": format_currency(member.donation_total),
                "Status": member.status,
            }
            for member in visible
        ]
    )
    _table_or_info(roster_df, "No board members match your search.")

    with st.expander("Add Board Member"):
        submitted = _board_member_form("board-add-form")
        if submitted is not None:
            store.add_board_member(**submitted)
            st.success("Board member added.")
            st.rerun()

    if selected_id is None:
        return

    selected = member_map[selected_id]
    st.markdown(f"#### {selected.name}")
    st.caption(
        f"{selected.title or '-'} at {selected.company or '-'} | "
        f"Term {_format_day(selected.term_start)} to {_format_day(selected.term_end)} | "
        f"Committees: {', '.join(selected.committees) or '-'}"
    )
    for label, value in member_profile_rows(selected):
        st.markdown(f"**{label}:** {value}")

    with st.expander("Edit Member"):
        changes = _board_member_form(f"board-edit-form-{selected.id}", selected)
        if changes is not None:
            store.update_board_member(selected.id, **changes)
            st.success("Board member updated.")
            st.rerun()

    if _confirm_delete("board", selected.id, selected.name):
        store.delete_board_member(selected.id)
        st.success("Board member removed.")
        st.rerun()


def _calendar_html(year: int, month0: int, events: list[CalendarEvent], selected: date) -> str:
    today = date.today()
    rows = ["<table class='crm-calendar'><tr>"]
    rows.extend(f"<th>{name}</th>" for name in WEEKDAY_NAMES)
    rows.append("</tr>")
    for week in grid_weeks(build_month_grid(year, month0, events)):
        rows.append("<tr>")
        for cell in week:
            if cell.is_blank:
                rows.append("<td></td>")
                continue
            classes = []
            if cell.date == today:
                classes.append("today")
            elif cell.date == selected:
                classes.append("selected")
            body = [f"<div><strong>{cell.day}</strong></div>"]
            for event in cell.visible_events:
                color = EVENT_TYPE_COLORS.get(event.type, "#6b7280")
                body.append(
                    f"<div class='cal-event' style='background:{color}'>"
                    f"{html.escape(event.title)}</div>"
                )
            if cell.overflow_count:
                body.append(f"<div class='cal-more'>+{cell.overflow_count} more</div>")
            rows.append(f"<td class='{' '.join(classes)}'>{''.join(body)}</td>")
        rows.append("</tr>")
    rows.append("</table>")
    return "".join(rows)


def _event_form(key: str, default_date: date, event: CalendarEvent | None = None) -> dict | None:
    with st.form(key, clear_on_submit=event is None):
        first_col, second_col = st.columns(2)
        with first_col:
            title = st.text_input("Title *", value=event.title if event else "")
            event_type = st.selectbox(
                "Type",
                EVENT_TYPES,
                index=EVENT_TYPES.index(event.type) if event else 0,
            )
            event_date = st.date_input("Date", value=event.date.date() if event else default_date)
            start_time = st.text_input("Start Time", value=event.start_time if event else "")
            end_time = st.text_input("End Time", value=(event.end_time or "") if event else "")
        with second_col:
            status = st.selectbox(
                "Status",
                EVENT_STATUSES,
                index=EVENT_STATUSES.index(event.status) if event else 0,
            )
            priority = st.selectbox(
                "Priority",
                EVENT_PRIORITIES,
                index=EVENT_PRIORITIES.index(event.priority) if event else 1,
            )
            location = st.text_input("Location", value=(event.location or "") if event else "")
            related_donor = st.text_input(
                "Related Donor",
                value=(event.related_donor or "") if event else "",
            )
            amount = st.number_input(
                "Amount",
                value=float(event.amount or 0) if event else 0.0,
                step=500.0,
            )
        description = st.text_area("Description", value=event.description if event else "", height=70)
        notes = st.text_area("Notes", value=(event.notes or "") if event else "", height=70)

        submitted = st.form_submit_button(
            "Save Event" if event else "Add Event",
            use_container_width=True,
        )
    if not submitted:
        return None
    return {
        "title": title,
        "type": event_type,
        "date": event_date,
        "start_time": start_time,
        "end_time": end_time or None,
        "status": status,
        "priority": priority,
        "location": location or None,
        "related_donor": related_donor or None,
        "amount": amount or None,
        "description": description,
        "notes": notes or None,
    }


def render_calendar_tab(store: CRMStore) -> None:
    st.markdown("### Calendar")
    _section_note("Monthly view, event management, and upcoming schedule.")

    today = date.today()
    if "calendar_year" not in st.session_state:
        st.session_state.calendar_year = today.year
        st.session_state.calendar_month0 = today.month - 1

    events = store.list_events()
    stats = calendar_stats(events)
    metric_columns = st.columns(4)
    with metric_columns[0]:
        _render_metric_card("Total Events", str(stats.total_events), "All time")
    with metric_columns[1]:
        _render_metric_card("This Week", str(stats.this_week), "Sunday through Saturday")
    with metric_columns[2]:
        _render_metric_card("Upcoming", str(stats.upcoming), "Next scheduled items")
    with metric_columns[3]:
        _render_metric_card("Overdue", str(stats.overdue), "Past-due deadlines")

    nav_prev, nav_label, nav_today, nav_next = st.columns([1, 3, 1, 1])
    with nav_prev:
        if st.button("Previous", key="calendar-prev", use_container_width=True):
            st.session_state.calendar_year, st.session_state.calendar_month0 = shift_month(
                st.session_state.calendar_year, st.session_state.calendar_month0, -1
            )
            st.rerun()
    with nav_today:
        if st.button("Today", key="calendar-today", use_container_width=True):
            st.session_state.calendar_year = today.year
            st.session_state.calendar_month0 = today.month - 1
            st.session_state.calendar_selected = today
            st.rerun()
    with nav_next:
        if st.button("Next", key="calendar-next", use_container_width=True):
            st.session_state.calendar_year, st.session_state.calendar_month0 = shift_month(
                st.session_state.calendar_year, st.session_state.calendar_month0, 1
            )
            st.rerun()

    year = st.session_state.calendar_year
    month0 = st.session_state.calendar_month0
    with nav_label:
        st.markdown(f"#### {month_label(year, month0)}")

    selected_day = st.date_input(
        "Selected Date",
        value=st.session_state.get("calendar_selected", today),
    )
    st.session_state.calendar_selected = selected_day

    left, right = st.columns([2.2, 1], gap="large")
    with left:
        st.markdown(_calendar_html(year, month0, events, selected_day), unsafe_allow_html=True)

    with right:
        st.markdown("#### Upcoming Events")
        upcoming = upcoming_events(events)
        if not upcoming:
            st.info("No upcoming events.")
        for event in upcoming:
            st.markdown(
                f"**{event.title}**  \n{_format_day(event.date)} at {event.start_time} "
                f"| {event.type} | {event.priority} priority"
            )

    st.markdown(f"#### Events on {_format_day(selected_day)}")
    day_events = events_for_date(events, selected_day)
    day_map = {event.id: event for event in day_events}
    if not day_map:
        st.info("No events on this day.")
    else:
        selected_event_id = st.selectbox(
            "Event",
            options=list(day_map.keys()),
            format_func=lambda event_id: f"{day_map[event_id].start_time} {day_map[event_id].title}",
        )
        selected_event = day_map[selected_event_id]
        st.caption(
            f"{selected_event.description or '-'} | Status: {selected_event.status} | "
            f"Location: {selected_event.location or '-'}"
        )
        if selected_event.amount:
            st.caption(f"Amount: {format_currency(selected_event.amount)}")

        with st.expander("Edit Event"):
            changes = _event_form(f"event-edit-{selected_event.id}", selected_day, selected_event)
            if changes is not None:
                try:
                    store.update_event(selected_event.id, **changes)
                    st.success("Event updated.")
                    st.rerun()
                except ValueError as exc:
                    st.error(str(exc))

        if _confirm_delete("event", selected_event.id, selected_event.title):
            store.delete_event(selected_event.id)
            st.success("Event deleted.")
            st.rerun()

    with st.expander("Add New Event"):
        new_event = _event_form("event-add-form", selected_day)
        if new_event is not None:
            try:
                store.add_event(
                    title=new_event["title"],
                    event_date=new_event["date"],
                    description=new_event["description"],
                    start_time=new_event["start_time"],
                    end_time=new_event["end_time"],
                    event_type=new_event["type"],
                    status=new_event["status"],
                    location=new_event["location"],
                    priority=new_event["priority"],
                    notes=new_event["notes"],
                    related_donor=new_event["related_donor"],
                    amount=new_event["amount"],
                )
                st.success("Event added.")
                st.rerun()
            except ValueError as exc:
                st.error(str(exc))


def render_finances_tab(store: CRMStore) -> None:
    st.markdown("### Finances")
    _section_note("Income, expenses, donation sources, and budget health.")

    today = date.today()
    controls = st.columns(4)
    with controls[0]:
        view_period = st.selectbox("View", ["monthly", "yearly"], format_func=str.title)
    with controls[1]:
        selected_year = int(
            st.number_input("Year", value=today.year, step=1, format="%d", key="finance-year")
        )
    with controls[2]:
        selected_month0 = st.selectbox(
            "Month",
            options=list(range(12)),
            index=today.month - 1,
            format_func=lambda month0: MONTH_NAMES[month0],
            disabled=view_period != "monthly",
        )
    with controls[3]:
        filter_category = st.selectbox("Category", ["all"] + TRANSACTION_CATEGORIES)
    search_term = st.text_input("Search Transactions", placeholder="Description or category")

    transactions = store.list_transactions()
    filter_args = {
        "period": view_period,
        "year": selected_year,
        "month0": selected_month0,
        "search_term": search_term,
        "category": filter_category,
    }
    filtered = filter_transactions(transactions, **filter_args)
    summary = financial_summary(transactions, **filter_args)

    metric_columns = st.columns(3)
    with metric_columns[0]:
        _render_metric_card(
            "Income",
            format_currency(summary.income),
            f"{summary.income_change:+.1f}% vs previous period",
        )
    with metric_columns[1]:
        _render_metric_card(
            "Expenses",
            format_currency(summary.expenses),
            f"{summary.expense_change:+.1f}% vs previous period",
        )
    with metric_columns[2]:
        _render_metric_card("Net Income", format_currency(summary.net_income), "Income minus expenses")

    left, right = st.columns([1.4, 1], gap="large")
    with left:
        st.markdown("#### Transactions")
        transactions_df = pd.DataFrame(
            [
                {
                    "Date": _format_day(row.date),
                    "Description": row.description,
                    "Category": row.category,
                    "Amount": format_currency(row.amount),
                    "Type": row.type,
                    "Recurring": "Yes" if row.recurring else "No",
                }
                for row in filtered
            ]
        )
        _table_or_info(transactions_df, "No transactions for the selected period.")

        st.download_button(
            "Export CSV",
            data=transactions_to_csv_bytes(filtered),
            file_name=export_filename(selected_year, selected_month0),
            mime="text/csv",
            key="finance-export",
        )

    with right:
        st.markdown("#### Donation Sources")
        breakdown_df = pd.DataFrame(
            [
                {
                    "Source": row.source,
                    "Amount": format_currency(row.amount),
                    "Gifts": row.count,
                    "Average Gift": format_currency(row.average_gift),
                    "Share": f"{row.percentage:.1f}%",
                }
                for row in donation_breakdown(filtered)
            ]
        )
        _table_or_info(breakdown_df, "No donations in this period.")

        st.markdown("#### Budget Analysis")
        for row in budget_analysis(store.list_budgets()):
            st.markdown(
                f"**{row.budget.category}**: {format_currency(row.budget.spent)} of "
                f"{format_currency(row.budget.budgeted)} ({row.percentage:.1f}%, {row.status})"
            )
            st.progress(min(row.percentage, 100.0) / 100)

    with st.expander("Add Transaction"):
        with st.form("transaction-add-form", clear_on_submit=True):
            first_col, second_col = st.columns(2)
            with first_col:
                description = st.text_input("Description *")
                amount = st.number_input("Amount *", min_value=0.0, step=100.0)
                transaction_type = st.selectbox("Type", TRANSACTION_TYPES)
                category = st.selectbox("Category", TRANSACTION_CATEGORIES)
            with second_col:
                subcategory = st.text_input("Subcategory")
                source = st.text_input("Source")
                status = st.selectbox("Status", TRANSACTION_STATUSES, index=1)
                recurring = st.checkbox("Recurring")
            notes = st.text_area("Notes", height=70)
            if st.form_submit_button("Add Transaction", use_container_width=True):
                try:
                    store.add_transaction(
                        description=description,
                        amount=amount,
                        transaction_type=transaction_type,
                        category=category,
                        subcategory=subcategory,
                        source=source,
                        recurring=recurring,
                        status=status,
                        notes=notes,
                    )
                    st.success("Transaction added.")
                    st.rerun()
                except ValueError as exc:
                    st.error(str(exc))

    if filtered:
        transaction_map = {row.id: row for row in filtered}
        selected_id = st.selectbox(
            "Transaction Details",
            options=list(transaction_map.keys()),
            format_func=lambda row_id: (
                f"{_format_day(transaction_map[row_id].date)} "
                f"{transaction_map[row_id].description}"
            ),
        )
        selected = transaction_map[selected_id]
        st.caption(
            f"{selected.category} / {selected.subcategory or '-'} | Source: {selected.source or '-'} | "
            f"Notes: {selected.notes or '-'}"
        )
        if _confirm_delete("transaction", selected.id, selected.description):
            store.delete_transaction(selected.id)
            st.success("Transaction deleted.")
            st.rerun()


def render_assistant_sidebar(session: AssistantSession) -> None:
    with st.sidebar:
        st.markdown("### AI Assistant")
        messages = session.messages()
        if not messages:
            st.caption("How can I help you today? Ask me anything about managing your CRM.")
        for message in messages:
            with st.chat_message(message.role):
                st.markdown(message.content)

        with st.form("assistant-form", clear_on_submit=True):
            prompt = st.text_input("Message", placeholder="Type a message...")
            send = st.form_submit_button("Send", use_container_width=True)
        if send and prompt.strip():
            with st.spinner("Thinking..."):
                time.sleep(config.ASSISTANT_REPLY_DELAY_SECONDS)
                session.send(prompt)
            st.rerun()

        if messages and st.button("Clear Conversation", key="assistant-clear"):
            session.clear()
            st.rerun()


def main() -> None:
    st.set_page_config(
        page_title="City Tutors CRM",
        page_icon=":books:",
        layout="wide",
    )
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = _get_store()
    _inject_styles()
    _hero()
    render_assistant_sidebar(AssistantSession(_get_storage()))

    tabs = st.tabs(["Dashboard", "Donors", "Board", "Calendar", "Finances"])

    with tabs[0]:
        render_dashboard(store)
    with tabs[1]:
        render_donors_tab(store)
    with tabs[2]:
        render_board_tab(store)
    with tabs[3]:
        render_calendar_tab(store)
    with tabs[4]:
        render_finances_tab(store)

    with st.sidebar:
        st.divider()
        if st.button("Reset Sample Data", key="reset-sample-data"):
            store.reset_to_seed()
            st.rerun()


if __name__ == "__main__":
    main()
