from sqlalchemy.orm import Session
from sqlalchemy import case, desc, func
from sqlalchemy.exc import SQLAlchemyError
from collections import defaultdict
from typing import Any, Dict, List
import logging

from ..models.complaint import Complaint
from ..models.user import User
from ..models.enums import ComplaintStatus
from ..utils.constants import AppConstants
from ..utils.date_helpers import DateHelpers

logger = logging.getLogger(__name__)


class AnalyticsServiceError(Exception):
    """Base exception for analytics errors"""

    pass


class AnalyticsService:
    """Read-only complaint statistics and maintenance leaderboards"""

    def __init__(self, db: Session):
        self.db = db

    def get_complaint_stats(self) -> Dict[str, Any]:
        """Totals per status plus grouped counts by category and priority"""

        try:
            total = self.db.query(func.count(Complaint.id)).scalar() or 0

            category_count = func.count(Complaint.id).label("count")
            by_category = (
                self.db.query(Complaint.category, category_count)
                .group_by(Complaint.category)
                .order_by(desc(category_count), Complaint.category)
                .all()
            )

            priority_count = func.count(Complaint.id).label("count")
            by_priority = (
                self.db.query(Complaint.priority, priority_count)
                .group_by(Complaint.priority)
                .all()
            )

            return {
                "total": total,
                "pending": self._count_with_status(ComplaintStatus.PENDING),
                "in_progress": self._count_with_status(ComplaintStatus.IN_PROGRESS),
                "resolved": self._count_with_status(ComplaintStatus.RESOLVED),
                "rejected": self._count_with_status(ComplaintStatus.REJECTED),
                "by_category": [
                    {"category": category, "count": count}
                    for category, count in by_category
                ],
                "by_priority": [
                    {"priority": priority, "count": count}
                    for priority, count in by_priority
                ],
            }

        except SQLAlchemyError as e:
            raise AnalyticsServiceError(f"Failed to compute statistics: {str(e)}")

    def get_staff_leaderboard(
        self, limit: int = AppConstants.LEADERBOARD_SIZE
    ) -> List[Dict[str, Any]]:
        """
        Fastest staff by mean time from assignment to resolution.

        Only resolved complaints with both an assignee and an assignment time
        count. Staff ids without a matching user are left out.
        """

        try:
            rows = (
                self.db.query(
                    Complaint.assigned_staff_id,
                    Complaint.assigned_at,
                    Complaint.resolved_at,
                )
                .filter(
                    Complaint.status == ComplaintStatus.RESOLVED.value,
                    Complaint.resolved_at.isnot(None),
                    Complaint.assigned_at.isnot(None),
                    Complaint.assigned_staff_id.isnot(None),
                )
                .all()
            )

            durations = defaultdict(list)
            for row in rows:
                durations[row.assigned_staff_id].append(
                    DateHelpers.duration_ms(row.assigned_at, row.resolved_at)
                )

            if not durations:
                return []

            staff_names = dict(
                self.db.query(User.id, User.name)
                .filter(User.id.in_(list(durations)))
                .all()
            )

        except SQLAlchemyError as e:
            raise AnalyticsServiceError(f"Failed to compute staff leaderboard: {str(e)}")

        leaderboard = []
        for staff_id, staff_durations in durations.items():
            if staff_id not in staff_names:
                continue

            avg_time_ms = sum(staff_durations) / len(staff_durations)
            leaderboard.append(
                {
                    "staff_id": staff_id,
                    "name": staff_names[staff_id],
                    "avg_time_ms": avg_time_ms,
                    "avg_time": DateHelpers.format_duration_ms(avg_time_ms),
                    "total_resolved": len(staff_durations),
                }
            )

        leaderboard.sort(key=lambda x: (x["avg_time_ms"], x["staff_id"]))
        return leaderboard[:limit]

    def get_block_leaderboard(
        self, limit: int = AppConstants.LEADERBOARD_SIZE
    ) -> List[Dict[str, Any]]:
        """Blocks with the fewest complaints, with their resolved counts"""

        total_complaints = func.count(Complaint.id).label("total_complaints")
        resolved_count = func.sum(
            case((Complaint.status == ComplaintStatus.RESOLVED.value, 1), else_=0)
        ).label("resolved_count")

        try:
            rows = (
                self.db.query(Complaint.hostel_block, total_complaints, resolved_count)
                .filter(Complaint.hostel_block.isnot(None), Complaint.hostel_block != "")
                .group_by(Complaint.hostel_block)
                .order_by(total_complaints, Complaint.hostel_block)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            raise AnalyticsServiceError(f"Failed to compute block leaderboard: {str(e)}")

        return [
            {
                "block": row.hostel_block,
                "total_complaints": row.total_complaints,
                "resolved_count": int(row.resolved_count or 0),
            }
            for row in rows
        ]

    def get_leaderboard(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "staff_leaderboard": self.get_staff_leaderboard(),
            "block_leaderboard": self.get_block_leaderboard(),
        }

    def _count_with_status(self, status: ComplaintStatus) -> int:
        return (
            self.db.query(func.count(Complaint.id))
            .filter(Complaint.status == status.value)
            .scalar()
            or 0
        )
