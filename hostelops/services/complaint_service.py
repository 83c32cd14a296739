from sqlalchemy.orm import Session, joinedload
from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from datetime import datetime
import logging

from ..models.complaint import Complaint
from ..models.user import User
from ..models.enums import ComplaintStatus
from ..schemas.complaint import ComplaintCreate, ComplaintAdminUpdate, ComplaintFilter
from .priority_classifier import detect_priority

logger = logging.getLogger(__name__)


# Custom Exceptions
class ComplaintServiceError(Exception):
    """Base exception for complaint service errors"""

    pass


class ComplaintNotFoundError(ComplaintServiceError):
    """Complaint not found"""

    pass


class PermissionDeniedError(ComplaintServiceError):
    """Caller has no rights over this complaint"""

    pass


class ComplaintValidationError(ComplaintServiceError):
    """Complaint data failed validation"""

    pass


def apply_status_change(
    complaint: Complaint,
    new_status: ComplaintStatus,
    acting_user_id: int,
    now: Optional[datetime] = None,
) -> None:
    """
    Move a complaint to ``new_status`` and stamp lifecycle timestamps.

    Any status may follow any other. ``assigned_at`` and ``resolved_at`` are
    written only while unset, so repeating a transition changes nothing.
    Entering In Progress also assigns the acting admin when nobody is
    assigned yet.
    """
    now = now or datetime.utcnow()
    complaint.status = new_status.value

    if new_status == ComplaintStatus.IN_PROGRESS and complaint.assigned_at is None:
        complaint.assigned_at = now
        if complaint.assigned_staff_id is None:
            complaint.assigned_staff_id = acting_user_id

    if new_status == ComplaintStatus.RESOLVED and complaint.resolved_at is None:
        complaint.resolved_at = now


class ComplaintService:
    def __init__(self, db: Session):
        self.db = db

    def create_complaint(
        self, submitter: User, complaint_data: ComplaintCreate
    ) -> Complaint:
        """File a complaint for the submitter with an auto-detected priority"""

        if not complaint_data.title or not complaint_data.description:
            raise ComplaintValidationError("Title and description are required")

        priority = detect_priority(complaint_data.description)

        try:
            complaint = Complaint(
                student_id=submitter.id,
                title=complaint_data.title,
                description=complaint_data.description,
                category=complaint_data.category.value,
                priority=priority.value,
                status=ComplaintStatus.PENDING.value,
                room_number=submitter.room_number,
                hostel_block=submitter.hostel_block,
            )

            self.db.add(complaint)
            self.db.commit()
            self.db.refresh(complaint)

        except SQLAlchemyError as e:
            self.db.rollback()
            raise ComplaintServiceError(f"Failed to create complaint: {str(e)}")

        logger.info(
            f"Complaint {complaint.id} filed by user {submitter.id} "
            f"with priority {priority.value}"
        )
        return complaint

    def update_by_admin(
        self,
        complaint_id: int,
        updates: ComplaintAdminUpdate,
        acting_user: User,
    ) -> Complaint:
        """Apply an administrator's status, priority and remark changes"""

        complaint = self._get_complaint_or_raise(complaint_id)
        update_data = updates.model_dump(exclude_unset=True)

        try:
            if update_data.get("status") is not None:
                apply_status_change(complaint, updates.status, acting_user.id)
            if update_data.get("priority") is not None:
                complaint.priority = updates.priority.value
            if "admin_remark" in update_data:
                complaint.admin_remark = updates.admin_remark

            self.db.commit()
            self.db.refresh(complaint)

        except SQLAlchemyError as e:
            self.db.rollback()
            raise ComplaintServiceError(f"Failed to update complaint: {str(e)}")

        logger.info(
            f"Complaint {complaint.id} updated by admin {acting_user.id}: "
            f"{sorted(update_data)}"
        )
        return complaint

    def get_visible_to(self, user: User, complaint_id: int) -> Complaint:
        """Get a complaint; students may only read their own"""

        complaint = self._get_complaint_or_raise(complaint_id)

        if user.is_student and complaint.student_id != user.id:
            raise PermissionDeniedError("Access denied")

        return complaint

    def list_for_student(self, user: User) -> List[Complaint]:
        """All complaints filed by the user, newest first"""
        return (
            self._base_query()
            .filter(Complaint.student_id == user.id)
            .order_by(desc(Complaint.created_at), desc(Complaint.id))
            .all()
        )

    def list_all(self, filters: Optional[ComplaintFilter] = None) -> List[Complaint]:
        """Administrative listing with exact-match filters, newest first"""

        query = self._base_query()

        if filters:
            if filters.category:
                query = query.filter(Complaint.category == filters.category.value)
            if filters.status:
                query = query.filter(Complaint.status == filters.status.value)
            if filters.priority:
                query = query.filter(Complaint.priority == filters.priority.value)

        return query.order_by(desc(Complaint.created_at), desc(Complaint.id)).all()

    def _base_query(self):
        return self.db.query(Complaint).options(joinedload(Complaint.student))

    def _get_complaint_or_raise(self, complaint_id: int) -> Complaint:
        complaint = self._base_query().filter(Complaint.id == complaint_id).first()
        if not complaint:
            raise ComplaintNotFoundError("Complaint not found")
        return complaint
