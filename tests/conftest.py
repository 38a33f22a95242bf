import os

# Must be set before the application (and its engine) is imported
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mentorship_admin.main import app
from mentorship_admin.db import Base, get_db
from mentorship_admin.models import ActionTicket, Assignment, Profile, Role
from mentorship_admin.models.role import DEFAULT_ROLES
from mentorship_admin.services.auth import verify_token

# Use SQLite in-memory for test DB
TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"
# For in-memory SQLite we must use a StaticPool so the TestClient requests and
# the fixtures below share the same database.
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db

ADMIN_ID = "00ultwew80Onb2vOT4x6"
MENTEE_ONLY_ID = "11"

PROFILES = [
    {"profile_id": "00u13oned0U8XP8Mb4x7", "first_name": "Mentor", "last_name": "Okta", "email": "llama001@maildrop.cc", "role_id": 3},
    {"profile_id": ADMIN_ID, "first_name": "Admin", "last_name": "Okta", "email": "llama002@maildrop.cc", "role_id": 2},
    {"profile_id": "7", "first_name": "Ashley", "last_name": "Mentor", "email": "ashley.mentor@maildrop.cc", "role_id": 3},
    {"profile_id": "9", "first_name": "Marcus", "last_name": "Mentor", "email": "marcus.mentor@maildrop.cc", "role_id": 3},
    {"profile_id": "10", "first_name": "Spencer", "last_name": "Mentee", "email": "spencer.mentee@maildrop.cc", "role_id": 4},
    {"profile_id": MENTEE_ONLY_ID, "first_name": "Olivia", "last_name": "Mentee", "email": "olivia.mentee@maildrop.cc", "role_id": 4},
    {"profile_id": "12", "first_name": "Kenji", "last_name": "Mentee", "email": "kenji.mentee@maildrop.cc", "role_id": 4},
    {"profile_id": "super-update", "first_name": "Super", "last_name": "Admin", "email": "super@maildrop.cc", "role_id": 1},
]

ASSIGNMENTS = [
    {"mentor_id": "7", "mentee_id": "10"},
    {"mentor_id": "9", "mentee_id": "12"},
    {"mentor_id": "00u13oned0U8XP8Mb4x7", "mentee_id": MENTEE_ONLY_ID},
]

ACTION_TICKETS = [
    {"submitted_by": "7", "subject_id": "10", "issue": "Spencer missed his 2nd weekly session, may be dropped?", "strike": True},
    {"submitted_by": MENTEE_ONLY_ID, "subject_id": "00u13oned0U8XP8Mb4x7", "issue": "My mentor isn't really helping me learn, could I seek reassignment?"},
    {"submitted_by": "00u13oned0U8XP8Mb4x7", "subject_id": MENTEE_ONLY_ID, "issue": "Mentee and I have not been getting along, I suggest a reassignment for best outcome."},
    {"submitted_by": "9", "subject_id": "12", "issue": "Has not turned in their assignments.", "strike": True},
]


@pytest.fixture(autouse=True)
def setup_test_db():
    # recreate and reseed the schema for each test to ensure isolation
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        db.add_all(Role(**row) for row in DEFAULT_ROLES)
        db.flush()
        db.add_all(Profile(**row) for row in PROFILES)
        db.flush()
        db.add_all(Assignment(**row) for row in ASSIGNMENTS)
        db.add_all(ActionTicket(**row) for row in ACTION_TICKETS)
        db.commit()
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


def _identity(profile_id: str):
    return lambda: {"uid": profile_id, "email": f"{profile_id}@maildrop.cc"}


@pytest.fixture
def client():
    """Client authenticated as the seeded admin profile."""
    app.dependency_overrides[verify_token] = _identity(ADMIN_ID)
    yield TestClient(app)
    app.dependency_overrides.pop(verify_token, None)


@pytest.fixture
def mentee_client():
    """Client authenticated as a seeded mentee (no admin rights)."""
    app.dependency_overrides[verify_token] = _identity(MENTEE_ONLY_ID)
    yield TestClient(app)
    app.dependency_overrides.pop(verify_token, None)


@pytest.fixture
def anonymous_client():
    app.dependency_overrides.pop(verify_token, None)
    return TestClient(app)


@pytest.fixture
def newcomer_client():
    """Client with a verified identity that has no profile yet."""
    app.dependency_overrides[verify_token] = _identity("newcomer")
    yield TestClient(app)
    app.dependency_overrides.pop(verify_token, None)
