"""Bundled sample collections written to storage on first run."""

from __future__ import annotations

from datetime import date, datetime

from .models import (
    BoardMember,
    Budget,
    CalendarEvent,
    Donor,
    DonorInteraction,
    Transaction,
)


def seed_board_members() -> list[BoardMember]:
    return [
        BoardMember(
            id="1",
            name="Michael Chen",
            position="chair",
            seat_number=0,
            term_start=date(2022, 1, 1),
            term_end=date(2025, 12, 31),
            attendance=95,
            donation_total=50000,
            committees=["Executive", "Finance", "Governance"],
            email="mchen@example.com",
            phone="(410) 555-0001",
            company="Chen Enterprises",
            title="CEO",
            notes=(
                "Strong advocate for STEM education. Has connections to several tech "
                "companies for potential partnerships."
            ),
            background=(
                "Founded Chen Enterprises in 2010 and grew it to $50M revenue. Ten years "
                "in product development at Microsoft. MBA from Wharton, BS Computer "
                "Science from MIT."
            ),
            expertise=["Technology", "Strategic Planning", "Fundraising", "Board Governance"],
            connections=(
                "Strong ties to the local tech and startup community. Connected to several "
                "family foundations focused on education."
            ),
            personal_interests="Marathon runner and youth basketball coach.",
            family_info="Married with two daughters who volunteer during the summer.",
            giving_history=(
                "Started with a $5,000 annual gift in 2020, increased to $50,000 annually "
                "since 2022. Secured a $25,000 corporate match."
            ),
            board_contributions=(
                "Led the strategic planning process and recruited 3 new major donors. "
                "Chairs the governance committee."
            ),
            future_goals=(
                "Establish an endowment fund and a corporate partnership program with "
                "tech companies."
            ),
            last_interaction=date(2024, 1, 10),
            preferred_contact="phone",
        ),
        BoardMember(
            id="2",
            name="Sarah Williams",
            position="vice-chair",
            seat_number=1,
            term_start=date(2023, 1, 1),
            term_end=date(2026, 12, 31),
            attendance=88,
            donation_total=35000,
            committees=["Executive", "Development"],
            email="swilliams@example.com",
            phone="(410) 555-0002",
            company="Williams Foundation",
            title="Executive Director",
            notes="Excellent fundraiser with deep community connections.",
            background=(
                "20+ years in the nonprofit sector. Previously a development director. "
                "Has managed the Williams Foundation since 2018."
            ),
            expertise=["Fundraising", "Grant Writing", "Donor Relations", "Event Planning"],
            connections="Extensive network among area philanthropists and grantmakers.",
            personal_interests="Art collector who hosts dinners to connect donors.",
            family_info="Married, one son in law school.",
            giving_history=(
                "Personal giving of $10,000 annually plus $25,000 from the Williams "
                "Foundation."
            ),
            board_contributions="Organized the annual gala raising $200,000.",
            future_goals="Develop a major gifts program and a planned giving society.",
            last_interaction=date(2024, 1, 12),
            preferred_contact="email",
        ),
        BoardMember(
            id="3",
            name="Robert Johnson",
            position="treasurer",
            seat_number=2,
            term_start=date(2021, 1, 1),
            term_end=date(2024, 12, 31),
            attendance=92,
            donation_total=25000,
            committees=["Finance", "Audit"],
            email="rjohnson@example.com",
            phone="(410) 555-0003",
            company="Johnson & Associates CPAs",
            title="Managing Partner",
            notes="CPA with extensive nonprofit financial experience.",
            background="CPA with 25 years of experience specializing in nonprofit audits.",
            expertise=["Nonprofit Finance", "Tax Law", "Audit", "Financial Planning"],
            giving_history=(
                "Consistent $10,000 annual donor since 2021, plus pro bono accounting."
            ),
            board_contributions="Implemented new financial controls and a reserves policy.",
            future_goals="Create a financial dashboard for the board.",
            last_interaction=date(2024, 1, 8),
            preferred_contact="email",
        ),
        BoardMember(
            id="4",
            name="Emily Davis",
            position="secretary",
            seat_number=3,
            term_start=date(2023, 6, 1),
            term_end=date(2026, 5, 31),
            attendance=96,
            donation_total=15000,
            committees=["Governance", "Marketing"],
            email="edavis@example.com",
            phone="(410) 555-0004",
            company="Davis Law Firm",
            title="Partner",
            notes="Provides pro bono legal counsel. Very detail-oriented.",
        ),
        BoardMember(
            id="5",
            name="James Martinez",
            position="member",
            seat_number=4,
            term_start=date(2024, 1, 1),
            term_end=date(2027, 12, 31),
            attendance=85,
            donation_total=20000,
            committees=["Programs", "Development"],
            email="jmartinez@example.com",
            phone="(410) 555-0005",
            company="Martinez Realty",
            title="Broker",
            notes="New board member, very enthusiastic. Has offered office space for events.",
        ),
        BoardMember(
            id="6",
            name="Linda Thompson",
            position="member",
            seat_number=5,
            term_start=date(2022, 1, 1),
            term_end=date(2025, 12, 31),
            attendance=78,
            donation_total=30000,
            committees=["Marketing", "Events"],
            email="lthompson@example.com",
            phone="(410) 555-0006",
            company="Thompson Media Group",
            title="President",
            notes="Helps with PR and media coverage. Great event planner.",
        ),
        BoardMember(
            id="7",
            name="David Brown",
            position="member",
            seat_number=6,
            term_start=date(2023, 1, 1),
            term_end=date(2026, 12, 31),
            attendance=90,
            donation_total=40000,
            committees=["Finance", "Programs"],
            email="dbrown@example.com",
            phone="(410) 555-0007",
            company="Brown Investment Partners",
            title="Managing Director",
            notes="Strong financial acumen. Interested in endowment building.",
        ),
        BoardMember(
            id="8",
            name="Patricia Garcia",
            position="member",
            seat_number=7,
            term_start=date(2021, 6, 1),
            term_end=date(2024, 5, 31),
            attendance=82,
            donation_total=18000,
            committees=["Programs", "Evaluation"],
            email="pgarcia@example.com",
            phone="(410) 555-0008",
            company="Baltimore City Schools",
            title="Principal",
            notes="Former educator. Provides valuable program insights.",
        ),
    ]


def seed_events() -> list[CalendarEvent]:
    return [
        CalendarEvent(
            id="1",
            title="Board Meeting",
            description="Monthly board meeting to review finances and programs",
            date=datetime(2024, 2, 15),
            start_time="18:00",
            end_time="19:30",
            type="board",
            location="Conference Room A",
            attendees=["Michael Chen", "Sarah Williams", "Robert Johnson"],
            priority="high",
            reminder=60,
            notes="Review Q1 budget and new program proposals",
        ),
        CalendarEvent(
            id="2",
            title="Donor Meeting - Tech Innovators Inc.",
            description="Quarterly check-in with corporate sponsor",
            date=datetime(2024, 2, 18),
            start_time="14:00",
            end_time="15:00",
            type="meeting",
            location="Their office",
            priority="high",
            related_donor="Tech Innovators Inc.",
            notes="Discuss employee volunteer program expansion",
        ),
        CalendarEvent(
            id="3",
            title="Spring Gala Planning Call",
            description="Planning committee call for annual fundraising gala",
            date=datetime(2024, 2, 20),
            start_time="10:00",
            end_time="11:00",
            type="call",
            attendees=["Sarah Williams", "Linda Thompson", "Event Committee"],
            priority="medium",
            reminder=30,
        ),
        CalendarEvent(
            id="4",
            title="Grant Application Deadline",
            description="Williams Foundation capacity building grant due",
            date=datetime(2024, 2, 22),
            start_time="17:00",
            type="deadline",
            priority="high",
            amount=50000,
            notes="Final review with program team before submission",
        ),
        CalendarEvent(
            id="5",
            title="Student Showcase Event",
            description="Quarterly student achievement showcase for donors",
            date=datetime(2024, 2, 25),
            start_time="15:00",
            end_time="17:00",
            type="event",
            location="Main auditorium",
            attendees=["Students", "Families", "Donors", "Board Members"],
            priority="high",
            notes="Invite major donors - great cultivation opportunity",
        ),
        CalendarEvent(
            id="6",
            title="Coffee with Michael Chen",
            description="Informal check-in with board chair",
            date=datetime(2024, 2, 12),
            start_time="08:00",
            end_time="09:00",
            type="meeting",
            status="completed",
            location="Starbucks downtown",
            priority="medium",
            related_donor="Michael Chen",
            notes="Discussed strategic planning retreat",
        ),
        CalendarEvent(
            id="7",
            title="Volunteer Orientation",
            description="Monthly orientation for new volunteers",
            date=datetime(2024, 2, 28),
            start_time="18:30",
            end_time="20:00",
            type="volunteer",
            location="Training room",
            priority="medium",
            notes="12 new volunteers signed up",
        ),
        CalendarEvent(
            id="8",
            title="Anderson Trust Site Visit",
            description="Trustee visit to review program impact",
            date=datetime(2024, 3, 5),
            start_time="13:00",
            end_time="16:00",
            type="meeting",
            location="City Tutors facility",
            priority="high",
            related_donor="The Anderson Trust",
            amount=75000,
            notes="Prepare student testimonials and impact data",
        ),
        CalendarEvent(
            id="9",
            title="Spring Fundraising Gala",
            description="Annual fundraising gala - Hearts for Education",
            date=datetime(2024, 3, 15),
            start_time="18:00",
            end_time="22:00",
            type="fundraiser",
            location="Grand Ballroom Hotel",
            priority="high",
            notes="Goal: $200,000 raised. 300 attendees expected.",
        ),
        CalendarEvent(
            id="10",
            title="Program Team Meeting",
            description="Weekly program coordination meeting",
            date=datetime(2024, 2, 14),
            start_time="09:00",
            end_time="10:00",
            type="meeting",
            priority="medium",
            notes="Review student progress reports",
        ),
    ]


def seed_transactions() -> list[Transaction]:
    return [
        Transaction(
            id="1",
            date=datetime(2024, 2, 1),
            description="Major Donor Contribution - Anderson Trust",
            amount=75000,
            type="income",
            category="Donations",
            subcategory="Major Gifts",
            source="Foundation Grant",
            donor_id="anderson-trust",
            notes="Annual capacity building grant",
        ),
        Transaction(
            id="2",
            date=datetime(2024, 2, 3),
            description="Staff Salaries - February",
            amount=-28500,
            type="expense",
            category="Personnel",
            subcategory="Salaries",
            recurring=True,
            notes="8 full-time staff members",
        ),
        Transaction(
            id="3",
            date=datetime(2024, 2, 5),
            description="Corporate Sponsorship - Tech Innovators Inc.",
            amount=40000,
            type="income",
            category="Donations",
            subcategory="Corporate",
            source="Corporate Partnership",
            donor_id="tech-innovators",
            notes="STEM lab equipment sponsorship",
        ),
        Transaction(
            id="4",
            date=datetime(2024, 2, 7),
            description="Office Rent - February",
            amount=-4500,
            type="expense",
            category="Operations",
            subcategory="Facilities",
            recurring=True,
        ),
        Transaction(
            id="5",
            date=datetime(2024, 2, 10),
            description="Educational Materials Purchase",
            amount=-2800,
            type="expense",
            category="Programs",
            subcategory="Supplies",
            notes="Books, workbooks, and digital resources",
        ),
        Transaction(
            id="6",
            date=datetime(2024, 2, 12),
            description="Individual Donations - Online Portal",
            amount=8500,
            type="income",
            category="Donations",
            subcategory="Individual",
            source="Online Donations",
            notes="45 individual donors",
        ),
        Transaction(
            id="7",
            date=datetime(2024, 2, 15),
            description="Insurance Premiums - Quarterly",
            amount=-3200,
            type="expense",
            category="Operations",
            subcategory="Insurance",
            recurring=True,
        ),
        Transaction(
            id="8",
            date=datetime(2024, 2, 18),
            description="Community First Bank Grant",
            amount=20000,
            type="income",
            category="Donations",
            subcategory="Corporate",
            source="Bank Grant",
            donor_id="community-first-bank",
            notes="Financial literacy program funding",
        ),
        Transaction(
            id="9",
            date=datetime(2024, 2, 20),
            description="Technology Equipment",
            amount=-12000,
            type="expense",
            category="Programs",
            subcategory="Equipment",
            notes="20 new tablets for students",
        ),
        Transaction(
            id="10",
            date=datetime(2024, 2, 22),
            description="Spring Gala Venue Deposit",
            amount=-5000,
            type="expense",
            category="Fundraising",
            subcategory="Events",
            notes="Grand Ballroom Hotel - March 15",
        ),
        Transaction(
            id="11",
            date=datetime(2024, 2, 25),
            description="Monthly Utilities",
            amount=-1200,
            type="expense",
            category="Operations",
            subcategory="Utilities",
            recurring=True,
        ),
        Transaction(
            id="12",
            date=datetime(2024, 2, 28),
            description="Board Member Donations",
            amount=15000,
            type="income",
            category="Donations",
            subcategory="Board",
            source="Board Giving",
            notes="Quarterly board member contributions",
        ),
    ]


def seed_budgets() -> list[Budget]:
    return [
        Budget(id="1", category="Personnel", budgeted=300000, spent=57000, period="yearly", year=2024),
        Budget(id="2", category="Programs", budgeted=150000, spent=14800, period="yearly", year=2024),
        Budget(id="3", category="Operations", budgeted=75000, spent=8900, period="yearly", year=2024),
        Budget(id="4", category="Fundraising", budgeted=25000, spent=5000, period="yearly", year=2024),
        Budget(id="5", category="Administration", budgeted=20000, spent=2100, period="yearly", year=2024),
    ]


def _interactions(*rows: tuple[date, str, str]) -> list[DonorInteraction]:
    return [
        DonorInteraction(id=index, date=when, type=kind, summary=summary)
        for index, (when, kind, summary) in enumerate(rows, start=1)
    ]


def seed_donors() -> list[Donor]:
    return [
        Donor(
            id=1,
            name="Sarah Johnson",
            organization="Johnson & Associates",
            email="sarah@johnsonassoc.com",
            phone="(555) 123-4567",
            total_given=125000,
            last_gift_date=date(2024, 1, 15),
            last_gift_amount=25000,
            notes=(
                "Passionate about education equity. Her daughter attended City Tutors "
                "programs 10 years ago. Prefers phone calls over email."
            ),
            interactions=_interactions(
                (date(2024, 1, 15), "donation", "Donated $25,000 for spring program expansion"),
                (date(2024, 1, 10), "call", "Discussed impact of her previous donations"),
                (date(2023, 12, 5), "meeting", "Annual donor appreciation dinner"),
            ),
            plans="Schedule quarterly check-ins. Invite to student showcase in March.",
            thoughts="Consider for board position in 2025. Very engaged.",
        ),
        Donor(
            id=2,
            name="Michael Chen",
            organization="Chen Tech Solutions",
            email="mchen@chentech.com",
            phone="(555) 234-5678",
            total_given=85000,
            last_gift_date=date(2024, 1, 20),
            last_gift_amount=10000,
            notes="Tech entrepreneur who believes in STEM education. Best reached early mornings.",
            interactions=_interactions(
                (date(2024, 1, 20), "donation", "Sponsored new computer lab - $10,000"),
                (date(2024, 1, 5), "email", "Sent proposal for tech mentorship program"),
                (date(2023, 11, 15), "meeting", "Tour of tutoring facilities with his team"),
            ),
            plans="Propose partnership for summer coding camp.",
            thoughts="Could be instrumental in modernizing our tech infrastructure.",
        ),
        Donor(
            id=3,
            name="Williams Foundation",
            email="info@williamsfoundation.org",
            phone="(555) 345-6789",
            total_given=250000,
            last_gift_date=date(2024, 1, 10),
            last_gift_amount=50000,
            notes="Family foundation focused on youth development. Requires detailed impact reports.",
            interactions=_interactions(
                (date(2024, 1, 10), "donation", "Q1 grant installment - $50,000"),
                (date(2023, 12, 1), "email", "Submitted annual impact report"),
                (date(2023, 10, 15), "meeting", "Site visit from foundation board members"),
            ),
            plans="Prepare Q2 report by April 15. Apply for capacity building grant.",
            thoughts="Our most reliable institutional funder.",
        ),
        Donor(
            id=4,
            name="Emily Rodriguez",
            organization="Rodriguez Consulting",
            email="emily@rodriguezcons.com",
            phone="(555) 456-7890",
            total_given=45000,
            last_gift_date=date(2023, 12, 15),
            last_gift_amount=5000,
            notes="HR consultant who volunteers as career mentor. Interested in college prep.",
            interactions=_interactions(
                (date(2023, 12, 15), "donation", "Year-end gift - $5,000"),
                (date(2023, 11, 20), "meeting", "Volunteered at career day event"),
                (date(2023, 10, 5), "call", "Offered to conduct mock interviews"),
            ),
            plans="Engage in volunteer recruitment committee.",
            thoughts="Bridge between donor and volunteer.",
        ),
        Donor(
            id=5,
            name="James Patterson",
            email="jpatterson@email.com",
            phone="(555) 567-8901",
            total_given=30000,
            last_gift_date=date(2023, 11, 20),
            last_gift_amount=2500,
            notes="Retired teacher, gives consistently. Likes handwritten thank you notes.",
            interactions=_interactions(
                (date(2023, 11, 20), "donation", "Annual giving - $2,500"),
                (date(2023, 9, 10), "email", "Sent newsletter with student success stories"),
                (date(2023, 6, 15), "call", "Birthday call - shared memories of teaching"),
            ),
            plans="Send quarterly updates on reading program.",
            thoughts="Consider legacy giving conversation.",
        ),
        Donor(
            id=6,
            name="Tech Innovators Inc.",
            email="giving@techinnovators.com",
            phone="(555) 678-9012",
            total_given=175000,
            last_gift_date=date(2024, 1, 25),
            last_gift_amount=35000,
            notes="Corporate partner that matches employee donations 2:1. Fiscal year ends in June.",
            interactions=_interactions(
                (date(2024, 1, 25), "donation", "Q4 corporate sponsorship - $35,000"),
                (date(2024, 1, 15), "meeting", "Planning meeting for employee volunteer day"),
                (date(2023, 12, 10), "email", "Renewed annual partnership agreement"),
            ),
            plans="Coordinate spring volunteer day.",
            thoughts="Growing relationship with potential for significant expansion.",
        ),
        Donor(
            id=7,
            name="Maria Gonzalez",
            organization="Gonzalez Family Fund",
            email="mgonzalez@gff.org",
            phone="(555) 789-0123",
            total_given=95000,
            last_gift_date=date(2024, 1, 5),
            last_gift_amount=15000,
            notes="First-generation college graduate, supports college access programs.",
            interactions=_interactions(
                (date(2024, 1, 5), "donation", "New Year gift for scholarship fund - $15,000"),
                (date(2023, 11, 30), "meeting", "Spoke at parent information night"),
                (date(2023, 9, 20), "call", "Discussed creating named scholarship"),
            ),
            plans="Finalize scholarship criteria.",
            thoughts="Powerful advocate in the Latino community.",
        ),
        Donor(
            id=8,
            name="Robert Thompson",
            organization="Thompson Enterprises",
            email="rthompson@thompsonent.com",
            phone="(555) 890-1234",
            total_given=60000,
            last_gift_date=date(2023, 10, 30),
            last_gift_amount=7500,
            notes="Business owner interested in entrepreneurship programs for teens.",
            interactions=_interactions(
                (date(2023, 10, 30), "donation", "Funded business plan competition - $7,500"),
                (date(2023, 9, 15), "meeting", "Judged student business pitch event"),
            ),
            plans="Develop formal internship partnership.",
            thoughts="Natural mentor figure.",
        ),
        Donor(
            id=9,
            name="Community First Bank",
            email="community@cfbank.com",
            phone="(555) 901-2345",
            total_given=140000,
            last_gift_date=date(2024, 1, 18),
            last_gift_amount=20000,
            notes="Local bank supporting financial literacy programs.",
            interactions=_interactions(
                (date(2024, 1, 18), "donation", "Financial literacy program grant - $20,000"),
                (date(2023, 12, 5), "meeting", "Bank staff volunteered for workshop"),
            ),
            plans="Submit grant for expanded financial education.",
            thoughts="Potential for multi-year commitment.",
        ),
        Donor(
            id=10,
            name="Dr. Lisa Wang",
            organization="Wang Medical Group",
            email="lwang@wangmedical.com",
            phone="(555) 012-3456",
            total_given=55000,
            last_gift_date=date(2023, 12, 20),
            last_gift_amount=8000,
            notes="Pediatrician who provides free health screenings for students.",
            interactions=_interactions(
                (date(2023, 12, 20), "donation", "Year-end gift - $8,000"),
                (date(2023, 11, 10), "meeting", "Conducted health workshop for families"),
            ),
            plans="Partner on wellness initiative.",
            thoughts="Brings a unique health perspective.",
        ),
        Donor(
            id=11,
            name="Green Energy Solutions",
            email="support@greenenergy.com",
            phone="(555) 123-4567",
            total_given=200000,
            last_gift_date=date(2024, 1, 22),
            last_gift_amount=40000,
            notes="Renewable energy company supporting STEM and environmental education.",
            interactions=_interactions(
                (date(2024, 1, 22), "donation", "STEM lab equipment - $40,000"),
                (date(2024, 1, 10), "meeting", "CEO toured facilities with leadership team"),
            ),
            plans="Develop environmental science curriculum.",
            thoughts="Major growth potential.",
        ),
        Donor(
            id=12,
            name="The Anderson Trust",
            email="trustees@andersontrust.org",
            phone="(555) 345-6789",
            total_given=300000,
            last_gift_date=date(2024, 1, 12),
            last_gift_amount=75000,
            notes="Major family trust. Formal application process. Trustee meeting in May.",
            interactions=_interactions(
                (date(2024, 1, 12), "donation", "Annual grant disbursement - $75,000"),
                (date(2023, 11, 30), "email", "Submitted comprehensive impact report"),
            ),
            plans="Prepare for May trustee meeting.",
            thoughts="Largest institutional funder.",
        ),
        Donor(
            id=13,
            name="Excellence Foundation",
            email="grants@excellencefdn.org",
            phone="(555) 012-3456",
            total_given=350000,
            last_gift_date=date(2024, 1, 2),
            last_gift_amount=100000,
            notes="National foundation with highly competitive grants.",
            interactions=_interactions(
                (date(2024, 1, 2), "donation", "Excellence in tutoring grant - $100,000"),
                (date(2023, 11, 15), "email", "Submitted 50-page grant proposal"),
            ),
            plans="Prepare for mid-year evaluation visit.",
            thoughts="Prestigious funder that validates our work.",
        ),
    ]
