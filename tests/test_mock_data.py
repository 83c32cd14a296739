import warnings

import pytest
from sqlalchemy.exc import SAWarning
from sqlalchemy.orm import sessionmaker

import hostelops.database as database
import hostelops.mock_data as mock_data
from hostelops.database import session_scope
from hostelops.mock_data import MockDataGenerator
from hostelops.models import Announcement, Complaint, User
from hostelops.models.enums import ComplaintPriority, ComplaintStatus
from hostelops.services.analytics_service import AnalyticsService


@pytest.fixture
def scoped_sessions(engine, monkeypatch):
    """Point session_scope at the in-memory test engine"""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    monkeypatch.setattr(database, "SessionLocal", TestingSessionLocal)
    return TestingSessionLocal


def test_generates_consistent_population(db):
    generator = MockDataGenerator(db, seed=42)
    generator.generate_all()

    assert db.query(User).count() == 23
    assert db.query(Complaint).count() == 60
    assert db.query(Announcement).count() == 10

    for complaint in db.query(Complaint).all():
        assert complaint.priority != ComplaintPriority.URGENT.value
        if complaint.status == ComplaintStatus.PENDING.value:
            assert complaint.assigned_at is None
        else:
            assert complaint.assigned_at is not None
            assert complaint.assigned_staff_id is not None
        if complaint.status == ComplaintStatus.RESOLVED.value:
            assert complaint.resolved_at >= complaint.assigned_at


def test_clear_existing_data(db):
    generator = MockDataGenerator(db, seed=1)
    generator.generate_all()

    with warnings.catch_warnings():
        warnings.simplefilter("error", SAWarning)
        MockDataGenerator(db, seed=2).generate_all(clear_existing=True)

    assert db.query(User).count() == 23


def test_seeded_data_feeds_leaderboards(db):
    MockDataGenerator(db, seed=7).generate_all()

    leaderboard = AnalyticsService(db).get_leaderboard()

    assert 0 < len(leaderboard["block_leaderboard"]) <= 5
    assert len(leaderboard["staff_leaderboard"]) <= 5


def test_main_seeds_through_session_scope(scoped_sessions, monkeypatch):
    monkeypatch.setattr(mock_data, "init_db", lambda: None)

    mock_data.main()

    with session_scope() as db:
        assert db.query(User).count() == 23
        assert db.query(Complaint).count() == 60


def test_session_scope_rolls_back_on_error(scoped_sessions):
    with pytest.raises(RuntimeError):
        with session_scope() as db:
            db.add(User(email="x@hostel.test", name="X", supabase_id="sb-x"))
            db.flush()
            raise RuntimeError("boom")

    with session_scope() as db:
        assert db.query(User).count() == 0
