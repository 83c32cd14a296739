from types import SimpleNamespace

from hostelops.database import get_supabase
from hostelops.main import app
from hostelops.models import User


def supabase_user(user_metadata=None, app_metadata=None, uid="sb-1"):
    return SimpleNamespace(
        id=uid,
        email=f"{uid}@hostel.test",
        user_metadata=user_metadata,
        app_metadata=app_metadata,
    )


class FakeAuth:
    def __init__(self, user):
        self.user = user

    def get_user(self, token):
        return SimpleNamespace(user=self.user)


def test_self_declared_admin_role_is_ignored(db):
    user = User.create_from_supabase(
        supabase_user(
            user_metadata={"full_name": "Eve", "role": "admin", "hostel_block": "B9"}
        ),
        db,
    )

    assert user.is_student
    assert not user.is_admin
    assert user.hostel_block is None
    assert user.name == "Eve"


def test_role_and_block_come_from_app_metadata(db):
    admin = User.create_from_supabase(
        supabase_user(
            user_metadata={"full_name": "Warden"},
            app_metadata={"role": "admin"},
            uid="sb-admin",
        ),
        db,
    )
    student = User.create_from_supabase(
        supabase_user(
            user_metadata={"name": "Asha", "room_number": "B1-101"},
            app_metadata={"role": "student", "hostel_block": "B1"},
            uid="sb-student",
        ),
        db,
    )

    assert admin.is_admin
    assert student.hostel_block == "B1"
    assert student.room_number == "B1-101"
    assert student.name == "Asha"


def test_unknown_role_falls_back_to_student(db):
    user = User.create_from_supabase(
        supabase_user(app_metadata={"role": "superuser"}), db
    )

    assert user.is_student
    assert user.name == "sb-1"


def test_metadata_admin_cannot_reach_admin_routes(client, db):
    fake = SimpleNamespace(
        auth=FakeAuth(
            supabase_user(user_metadata={"full_name": "Eve", "role": "admin"})
        )
    )
    app.dependency_overrides[get_supabase] = lambda: fake

    response = client.get(
        "/api/complaints/stats", headers={"Authorization": "Bearer token"}
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"
    assert db.query(User).filter(User.supabase_id == "sb-1").one().is_student
