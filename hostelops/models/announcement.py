from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean, Text
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import AnnouncementCategory, AnnouncementPriority


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(120), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(
        String, nullable=False, default=AnnouncementCategory.GENERAL.value
    )
    priority = Column(
        String, nullable=False, default=AnnouncementPriority.NORMAL.value
    )
    target_block = Column(String, nullable=True)  # None = all blocks
    expiry_date = Column(DateTime, nullable=True)  # None = never expires
    is_active = Column(Boolean, default=True, nullable=False)

    # Foreign Keys
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    author = relationship(
        "User", back_populates="announcements", foreign_keys=[created_by]
    )

    @property
    def is_expired(self) -> bool:
        if not self.expiry_date:
            return False
        return datetime.utcnow() > self.expiry_date
