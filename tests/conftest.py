import itertools
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hostelops.database import Base, get_db
from hostelops.dependencies.permissions import get_current_user
from hostelops.main import app
from hostelops.models import Announcement, Complaint, User
from hostelops.models.enums import ComplaintStatus, UserRole


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make_user(
        role=UserRole.STUDENT, hostel_block=None, room_number=None, name=None
    ):
        n = next(counter)
        user = User(
            email=f"user{n}@hostel.test",
            name=name or f"User {n}",
            supabase_id=f"supabase-{n}",
            role=role.value,
            hostel_block=hostel_block,
            room_number=room_number,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def student(make_user):
    return make_user(hostel_block="B1", room_number="B1-101", name="Asha")


@pytest.fixture
def other_student(make_user):
    return make_user(hostel_block="B2", room_number="B2-204", name="Ravi")


@pytest.fixture
def admin(make_user):
    return make_user(role=UserRole.ADMIN, name="Warden Rao")


@pytest.fixture
def make_complaint(db):
    """Insert a complaint row directly, bypassing the lifecycle rules"""

    def _make_complaint(student, **overrides):
        values = {
            "student_id": student.id,
            "title": "Leaking tap",
            "description": "Tap in bathroom",
            "category": "Plumbing",
            "priority": "Low",
            "status": ComplaintStatus.PENDING.value,
            "room_number": student.room_number,
            "hostel_block": student.hostel_block,
        }
        values.update(overrides)
        complaint = Complaint(**values)
        db.add(complaint)
        db.commit()
        db.refresh(complaint)
        return complaint

    return _make_complaint


@pytest.fixture
def make_announcement(db):
    def _make_announcement(author, **overrides):
        values = {
            "title": "Water supply",
            "description": "Water will be off from 2pm to 4pm",
            "category": "Water",
            "priority": "Normal",
            "created_by": author.id,
        }
        values.update(overrides)
        announcement = Announcement(**values)
        db.add(announcement)
        db.commit()
        db.refresh(announcement)
        return announcement

    return _make_announcement


@pytest.fixture
def resolved_after(make_complaint):
    """Resolved complaint whose resolution took ``duration_ms``"""

    def _resolved_after(student, staff, duration_ms, **overrides):
        assigned_at = datetime(2024, 1, 1, 9, 0, 0)
        return make_complaint(
            student,
            status=ComplaintStatus.RESOLVED.value,
            assigned_staff_id=staff.id,
            assigned_at=assigned_at,
            resolved_at=assigned_at + timedelta(milliseconds=duration_ms),
            **overrides,
        )

    return _resolved_after


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Return the test client acting as the given user"""

    def _login(user):
        app.dependency_overrides[get_current_user] = lambda: user
        return client

    return _login
