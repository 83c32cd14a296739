from sqlalchemy.orm import Session, joinedload
from sqlalchemy import desc, or_
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from datetime import datetime
import logging

from ..models.announcement import Announcement
from ..models.user import User
from ..schemas.announcement import AnnouncementCreate, AnnouncementUpdate
from ..utils.constants import AppConstants

logger = logging.getLogger(__name__)


# Custom Exceptions
class AnnouncementServiceError(Exception):
    """Base exception for announcement service errors"""

    pass


class AnnouncementNotFoundError(AnnouncementServiceError):
    """Announcement not found"""

    pass


class AnnouncementValidationError(AnnouncementServiceError):
    """Announcement data failed validation"""

    pass


class AnnouncementService:
    def __init__(self, db: Session):
        self.db = db

    def create_announcement(
        self, author: User, announcement_data: AnnouncementCreate
    ) -> Announcement:
        """Create an announcement; students can only announce to their own block"""

        target_block = announcement_data.target_block
        if author.is_student:
            target_block = (
                author.hostel_block or AppConstants.DEFAULT_STUDENT_TARGET_BLOCK
            )

        try:
            announcement = Announcement(
                title=announcement_data.title,
                description=announcement_data.description,
                category=announcement_data.category.value,
                priority=announcement_data.priority.value,
                target_block=target_block or None,
                expiry_date=announcement_data.expiry_date,
                created_by=author.id,
            )

            self.db.add(announcement)
            self.db.commit()
            self.db.refresh(announcement)

        except SQLAlchemyError as e:
            self.db.rollback()
            raise AnnouncementServiceError(f"Failed to create announcement: {str(e)}")

        logger.info(
            f"Announcement {announcement.id} created by user {author.id} "
            f"for block {announcement.target_block or 'ALL'}"
        )
        return announcement

    def list_visible(
        self, user: User, now: Optional[datetime] = None
    ) -> List[Announcement]:
        """Active, unexpired announcements the user may see, newest first"""

        now = now or datetime.utcnow()
        query = self._base_query().filter(
            Announcement.is_active == True,
            or_(Announcement.expiry_date.is_(None), Announcement.expiry_date > now),
        )

        # Students with a known block see global posts and their own block only
        if user.is_student and user.hostel_block:
            query = query.filter(
                or_(
                    Announcement.target_block.is_(None),
                    Announcement.target_block == user.hostel_block,
                )
            )

        return query.order_by(
            desc(Announcement.created_at), desc(Announcement.id)
        ).all()

    def list_all_including_expired_and_inactive(self) -> List[Announcement]:
        return (
            self._base_query()
            .order_by(desc(Announcement.created_at), desc(Announcement.id))
            .all()
        )

    def get_announcement(self, announcement_id: int) -> Announcement:
        return self._get_announcement_or_raise(announcement_id)

    def update_announcement(
        self, announcement_id: int, announcement_updates: AnnouncementUpdate
    ) -> Announcement:
        """Apply only the fields present in the update"""

        announcement = self._get_announcement_or_raise(announcement_id)
        update_data = announcement_updates.model_dump(exclude_unset=True)

        for field in ("title", "description", "category", "priority", "is_active"):
            if field in update_data and update_data[field] is None:
                raise AnnouncementValidationError(f"{field} cannot be empty")

        try:
            for field, value in update_data.items():
                setattr(
                    announcement,
                    field,
                    value.value if hasattr(value, "value") else value,
                )

            self.db.commit()
            self.db.refresh(announcement)

        except SQLAlchemyError as e:
            self.db.rollback()
            raise AnnouncementServiceError(f"Failed to update announcement: {str(e)}")

        logger.info(f"Announcement {announcement.id} updated: {sorted(update_data)}")
        return announcement

    def delete_announcement(self, announcement_id: int) -> bool:
        announcement = self._get_announcement_or_raise(announcement_id)

        try:
            self.db.delete(announcement)
            self.db.commit()

        except SQLAlchemyError as e:
            self.db.rollback()
            raise AnnouncementServiceError(f"Failed to delete announcement: {str(e)}")

        logger.info(f"Announcement {announcement_id} deleted")
        return True

    def _base_query(self):
        return self.db.query(Announcement).options(joinedload(Announcement.author))

    def _get_announcement_or_raise(self, announcement_id: int) -> Announcement:
        announcement = (
            self._base_query().filter(Announcement.id == announcement_id).first()
        )
        if not announcement:
            raise AnnouncementNotFoundError("Announcement not found")
        return announcement
