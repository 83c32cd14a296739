"""
Mock Data Generator for HostelOps
Populates a development database with students, admins, complaints and
announcements, including resolved complaints so the leaderboards have data.

Usage:
    python -m hostelops.mock_data
"""

import logging
import random
import uuid
from datetime import datetime, timedelta
from faker import Faker
from sqlalchemy.orm import Session

from .database import init_db, session_scope
from .models import Announcement, Complaint, User
from .models.enums import (
    AnnouncementCategory,
    AnnouncementPriority,
    ComplaintCategory,
    ComplaintStatus,
    UserRole,
)
from .services.complaint_service import apply_status_change
from .services.priority_classifier import detect_priority

logger = logging.getLogger(__name__)

BLOCKS = ["A", "B", "C", "D"]

COMPLAINT_TEMPLATES = {
    ComplaintCategory.PLUMBING: [
        "Tap leak in the bathroom",
        "No water in the washroom since morning",
        "Flush is not working",
    ],
    ComplaintCategory.ELECTRICAL: [
        "Switch board sparking near the bed",
        "Tube light broken",
        "Fan makes noise at night",
    ],
    ComplaintCategory.FURNITURE: ["Need new chair", "Cupboard door broken"],
    ComplaintCategory.CLEANING: ["Corridor not cleaned this week"],
    ComplaintCategory.INTERNET_WIFI: ["WiFi not working in the room"],
    ComplaintCategory.PEST_CONTROL: ["Cockroaches in the pantry"],
    ComplaintCategory.SECURITY: ["Main gate lock has an issue"],
    ComplaintCategory.OTHER: ["Notice board needs replacing"],
}


class MockDataGenerator:
    def __init__(self, db: Session, seed: int = None):
        self.db = db
        self.fake = Faker()
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
        self.students = []
        self.admins = []

    def clear_existing_data(self):
        """Clear existing data (use with caution!)"""
        logger.info("🗑️  Clearing existing data...")

        # Delete in reverse dependency order
        self.db.query(Announcement).delete()
        self.db.query(Complaint).delete()
        self.db.query(User).delete()
        self.db.commit()
        # Bulk deletes bypass the identity map
        self.db.expunge_all()

    def create_users(self, student_count: int = 20, admin_count: int = 3):
        for _ in range(admin_count):
            self.admins.append(self._make_user(UserRole.ADMIN))
        for _ in range(student_count):
            self.students.append(self._make_user(UserRole.STUDENT))

        self.db.add_all(self.admins + self.students)
        self.db.commit()
        logger.info(
            f"👥 Created {len(self.students)} students and {len(self.admins)} admins"
        )

    def create_complaints(self, count: int = 60):
        now = datetime.utcnow()
        complaints = []

        for _ in range(count):
            student = self.random.choice(self.students)
            category = self.random.choice(list(COMPLAINT_TEMPLATES))
            title = self.random.choice(COMPLAINT_TEMPLATES[category])
            description = f"{title}. {self.fake.sentence()}"
            created_at = now - timedelta(hours=self.random.randint(1, 24 * 30))

            complaint = Complaint(
                student_id=student.id,
                title=title,
                description=description,
                category=category.value,
                priority=detect_priority(description).value,
                status=ComplaintStatus.PENDING.value,
                room_number=student.room_number,
                hostel_block=student.hostel_block,
                created_at=created_at,
            )
            self._advance_lifecycle(complaint, created_at, now)
            complaints.append(complaint)

        self.db.add_all(complaints)
        self.db.commit()
        logger.info(f"🛠️  Created {len(complaints)} complaints")

    def create_announcements(self, count: int = 10):
        now = datetime.utcnow()
        announcements = []

        for _ in range(count):
            author = self.random.choice(self.admins)
            expiry_days = self.random.choice([None, -2, 3, 14])
            announcements.append(
                Announcement(
                    title=self.fake.sentence(nb_words=5)[:120],
                    description=self.fake.paragraph(nb_sentences=3),
                    category=self.random.choice(list(AnnouncementCategory)).value,
                    priority=self.random.choice(list(AnnouncementPriority)).value,
                    target_block=self.random.choice([None] + BLOCKS),
                    expiry_date=(
                        now + timedelta(days=expiry_days)
                        if expiry_days is not None
                        else None
                    ),
                    is_active=self.random.random() > 0.1,
                    created_by=author.id,
                    created_at=now - timedelta(days=self.random.randint(0, 10)),
                )
            )

        self.db.add_all(announcements)
        self.db.commit()
        logger.info(f"📢 Created {len(announcements)} announcements")

    def generate_all(self, clear_existing: bool = False):
        if clear_existing:
            self.clear_existing_data()
        self.create_users()
        self.create_complaints()
        self.create_announcements()

    def _make_user(self, role: UserRole) -> User:
        user = User(
            email=f"{uuid.uuid4().hex[:8]}.{self.fake.user_name()}@hostel.test",
            name=self.fake.name(),
            supabase_id=str(uuid.uuid4()),
            role=role.value,
        )
        if role == UserRole.STUDENT:
            block = self.random.choice(BLOCKS)
            user.hostel_block = block
            user.room_number = f"{block}-{self.random.randint(101, 420)}"
        return user

    def _advance_lifecycle(self, complaint: Complaint, created_at, now):
        """Move some complaints through In Progress and Resolved/Rejected"""
        roll = self.random.random()
        if roll < 0.3:
            return

        admin = self.random.choice(self.admins)
        assigned_at = min(created_at + timedelta(minutes=self.random.randint(5, 600)), now)
        apply_status_change(
            complaint, ComplaintStatus.IN_PROGRESS, admin.id, now=assigned_at
        )

        if roll < 0.5:
            return

        finished_at = min(
            assigned_at + timedelta(minutes=self.random.randint(30, 72 * 60)), now
        )
        final_status = (
            ComplaintStatus.RESOLVED if roll < 0.9 else ComplaintStatus.REJECTED
        )
        apply_status_change(complaint, final_status, admin.id, now=finished_at)


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()

    with session_scope() as db:
        MockDataGenerator(db).generate_all(clear_existing=True)
    logger.info("✅ Mock data created")


if __name__ == "__main__":
    main()
