from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Index
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import ComplaintPriority, ComplaintStatus


class Complaint(Base):
    __tablename__ = "complaints"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    priority = Column(String, nullable=False, default=ComplaintPriority.LOW.value)
    status = Column(String, nullable=False, default=ComplaintStatus.PENDING.value)
    admin_remark = Column(Text)

    # Copied from the submitter when the complaint is filed
    room_number = Column(String)
    hostel_block = Column(String)

    # Foreign Keys
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    assigned_staff_id = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    # Lifecycle timestamps, each set once
    assigned_at = Column(DateTime)
    resolved_at = Column(DateTime)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    student = relationship(
        "User", back_populates="complaints", foreign_keys=[student_id]
    )
    assigned_staff = relationship(
        "User", back_populates="assigned_complaints", foreign_keys=[assigned_staff_id]
    )

    __table_args__ = (
        Index("idx_complaint_student_created", "student_id", "created_at"),
        Index("idx_complaint_status_staff", "status", "assigned_staff_id"),
        Index("idx_complaint_block", "hostel_block"),
    )
