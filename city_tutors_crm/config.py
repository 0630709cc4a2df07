"""Settings shared by the store, derived views, and the Streamlit app."""

from __future__ import annotations

import os
from pathlib import Path

# =============================================================================
# Storage
# =============================================================================
DATA_DIR = Path(os.environ.get("CITY_TUTORS_CRM_DATA_DIR", ".data"))
DB_FILENAME = "city_tutors_crm.db"
DB_PATH = DATA_DIR / DB_FILENAME

BOARD_MEMBERS_KEY = "boardMembers"
CALENDAR_EVENTS_KEY = "calendarEvents"
TRANSACTIONS_KEY = "financialTransactions"
BUDGETS_KEY = "financialBudgets"
ASSISTANT_MESSAGES_KEY = "assistantMessages"

# =============================================================================
# Board
# =============================================================================
DEFAULT_ATTENDANCE = 85
TERM_LENGTH_YEARS = 3
TERM_EXPIRY_WINDOW_MONTHS = 6
DAYS_PER_MONTH_ESTIMATE = 30

# Boardroom table (SVG units)
TABLE_CENTER_X = 400
TABLE_CENTER_Y = 250
TABLE_RADIUS_X = 280
TABLE_RADIUS_Y = 180

# =============================================================================
# Calendar
# =============================================================================
UPCOMING_EVENTS_LIMIT = 8
DAY_CELL_VISIBLE_EVENTS = 2
DEFAULT_START_TIME = "09:00"

# =============================================================================
# Donors
# =============================================================================
RECENT_DONOR_DAYS = 90
ACTIVE_DONOR_DAYS = 365

# =============================================================================
# Finances
# =============================================================================
BUDGET_WARNING_PERCENT = 90
BUDGET_OVER_PERCENT = 100
DONATIONS_CATEGORY = "Donations"

# =============================================================================
# Dashboard
# =============================================================================
MONTHLY_FUNDRAISING_GOAL = 150000
DASHBOARD_UPCOMING_COUNT = 3
DASHBOARD_RECENT_DONOR_COUNT = 3

# =============================================================================
# Assistant
# =============================================================================
ASSISTANT_REPLY_DELAY_SECONDS = 0.5
ASSISTANT_TRANSCRIPT_LIMIT = 20
