from datetime import datetime

from hostelops.models.enums import ComplaintStatus, UserRole
from hostelops.services.analytics_service import AnalyticsService
from hostelops.utils.date_helpers import DateHelpers


class TestComplaintStats:
    def test_empty_population(self, db):
        stats = AnalyticsService(db).get_complaint_stats()

        assert stats["total"] == 0
        assert stats["pending"] == 0
        assert stats["by_category"] == []
        assert stats["by_priority"] == []

    def test_counts(self, db, student, make_complaint):
        make_complaint(student, category="Plumbing", priority="High")
        make_complaint(student, category="Plumbing", status="In Progress")
        make_complaint(student, category="Plumbing", status="Resolved")
        make_complaint(student, category="Electrical", status="Resolved")
        make_complaint(student, category="Security", status="Rejected")

        stats = AnalyticsService(db).get_complaint_stats()

        assert stats["total"] == 5
        assert stats["pending"] == 1
        assert stats["in_progress"] == 1
        assert stats["resolved"] == 2
        assert stats["rejected"] == 1
        assert stats["by_category"][0] == {"category": "Plumbing", "count": 3}
        assert sorted(c["category"] for c in stats["by_category"][1:]) == [
            "Electrical",
            "Security",
        ]
        assert {p["priority"]: p["count"] for p in stats["by_priority"]} == {
            "High": 1,
            "Low": 4,
        }


class TestStaffLeaderboard:
    def test_average_and_format(self, db, student, admin, resolved_after):
        for duration in (60_000, 120_000, 180_000):
            resolved_after(student, admin, duration)

        leaderboard = AnalyticsService(db).get_staff_leaderboard()

        assert leaderboard == [
            {
                "staff_id": admin.id,
                "name": "Warden Rao",
                "avg_time_ms": 120_000,
                "avg_time": "0h 2m",
                "total_resolved": 3,
            }
        ]

    def test_only_resolved_and_assigned_complaints_count(
        self, db, student, admin, make_complaint, resolved_after
    ):
        resolved_after(student, admin, 60_000)
        make_complaint(
            student,
            status=ComplaintStatus.IN_PROGRESS.value,
            assigned_staff_id=admin.id,
            assigned_at=datetime(2024, 1, 1),
        )
        make_complaint(
            student,
            status=ComplaintStatus.RESOLVED.value,
            resolved_at=datetime(2024, 1, 2),
        )

        leaderboard = AnalyticsService(db).get_staff_leaderboard()

        assert len(leaderboard) == 1
        assert leaderboard[0]["total_resolved"] == 1

    def test_fastest_first_top_five(self, db, student, make_user, resolved_after):
        staff = [make_user(role=UserRole.ADMIN, name=f"Staff {i}") for i in range(7)]
        for i, member in enumerate(staff):
            resolved_after(student, member, (7 - i) * 3_600_000)

        leaderboard = AnalyticsService(db).get_staff_leaderboard()

        assert len(leaderboard) == 5
        assert [entry["name"] for entry in leaderboard] == [
            "Staff 6",
            "Staff 5",
            "Staff 4",
            "Staff 3",
            "Staff 2",
        ]
        assert leaderboard[0]["avg_time"] == "1h 0m"

    def test_staff_without_user_row_dropped(
        self, db, student, admin, make_complaint, resolved_after
    ):
        resolved_after(student, admin, 60_000)
        make_complaint(
            student,
            status=ComplaintStatus.RESOLVED.value,
            assigned_staff_id=9999,
            assigned_at=datetime(2024, 1, 1, 9, 0),
            resolved_at=datetime(2024, 1, 1, 9, 0, 1),
        )

        leaderboard = AnalyticsService(db).get_staff_leaderboard()

        assert [entry["staff_id"] for entry in leaderboard] == [admin.id]


class TestBlockLeaderboard:
    def test_groups_by_block_fewest_first(self, db, make_user, make_complaint):
        b1 = make_user(hostel_block="B1")
        b2 = make_user(hostel_block="B2")
        no_block = make_user()

        for _ in range(3):
            make_complaint(b1)
        make_complaint(b1, status="Resolved")
        make_complaint(b2, status="Resolved")
        make_complaint(no_block)
        make_complaint(no_block, hostel_block="")

        leaderboard = AnalyticsService(db).get_block_leaderboard()

        assert leaderboard == [
            {"block": "B2", "total_complaints": 1, "resolved_count": 1},
            {"block": "B1", "total_complaints": 4, "resolved_count": 1},
        ]

    def test_limited_to_five(self, db, make_user, make_complaint):
        for i in range(7):
            make_complaint(make_user(hostel_block=f"Block {i}"))

        assert len(AnalyticsService(db).get_block_leaderboard()) == 5

    def test_combined_leaderboard(self, db):
        assert AnalyticsService(db).get_leaderboard() == {
            "staff_leaderboard": [],
            "block_leaderboard": [],
        }


class TestDurationFormat:
    def test_hours_and_minutes_are_floored(self):
        assert DateHelpers.format_duration_ms(0) == "0h 0m"
        assert DateHelpers.format_duration_ms(59_999) == "0h 0m"
        assert DateHelpers.format_duration_ms(9_000_000) == "2h 30m"
        assert DateHelpers.format_duration_ms(90_061_000.5) == "25h 1m"
