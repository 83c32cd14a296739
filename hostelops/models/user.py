from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base
from .enums import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)

    supabase_id = Column(String, unique=True, index=True, nullable=False)

    # Hostel profile
    role = Column(String, nullable=False, default=UserRole.STUDENT.value)
    room_number = Column(String, nullable=True)
    hostel_block = Column(String, nullable=True, index=True)

    is_active = Column(Boolean, default=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("supabase_id", name="uq_user_supabase_id"),
        UniqueConstraint("email", name="uq_user_email"),
    )

    complaints = relationship(
        "Complaint", back_populates="student", foreign_keys="Complaint.student_id"
    )
    assigned_complaints = relationship(
        "Complaint",
        back_populates="assigned_staff",
        foreign_keys="Complaint.assigned_staff_id",
    )
    announcements = relationship("Announcement", back_populates="author")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT.value

    @classmethod
    def create_from_supabase(cls, supabase_user, db_session):
        """Create new user from Supabase auth user"""
        # Only the service role can write app_metadata; users edit user_metadata
        # themselves, so it never decides role or block
        app_metadata = supabase_user.app_metadata or {}
        user_metadata = supabase_user.user_metadata or {}

        role = app_metadata.get("role")
        if role not in [r.value for r in UserRole]:
            role = UserRole.STUDENT.value

        user = cls(
            email=supabase_user.email,
            name=user_metadata.get("full_name")
            or user_metadata.get("name")
            or supabase_user.email.split("@")[0],
            supabase_id=supabase_user.id,
            role=role,
            room_number=user_metadata.get("room_number"),
            hostel_block=app_metadata.get("hostel_block"),
            is_active=True,
        )

        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    @classmethod
    def find_by_supabase_id(cls, db_session, supabase_id: str):
        return (
            db_session.query(cls)
            .filter(cls.supabase_id == supabase_id, cls.is_active == True)
            .first()
        )
