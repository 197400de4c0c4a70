"""
Shared test fixtures.

Settings are read at import time, so the environment is prepared here
before any ``app`` module is imported.
"""

import os

os.environ["DATABASE_PASSWORD"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RESEND_API_KEY"] = ""
os.environ["STORAGE_BACKEND"] = "local"
os.environ["RESET_HIDE_UNKNOWN_EMAIL"] = "false"

import datetime  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

import app.db.base  # noqa: E402,F401
from app.core.errors import DeliveryError, StorageError  # noqa: E402
from app.schemas.user import ProfilePictureUpload, UserCreate  # noqa: E402
from app.services.auth_service import AuthService  # noqa: E402
from app.services.session_context import FileSessionStore, SessionContext  # noqa: E402


# ======================================================================
# Fakes
# ======================================================================


class FakeMailer:
    """Records messages instead of sending them."""

    def __init__(self):
        self.sent: list[tuple[str, str, str]] = []
        self.fail = False

    def send(self, to_address: str, subject: str, html_body: str) -> str:
        if self.fail:
            raise DeliveryError()
        self.sent.append((to_address, subject, html_body))
        return f"msg-{len(self.sent)}"


class FakeBlobStore:
    """Keeps uploads in memory."""

    def __init__(self):
        self.uploads: list[tuple[str, ProfilePictureUpload]] = []
        self.fail = False

    def upload(self, owner_id: str, upload: ProfilePictureUpload) -> str:
        if self.fail:
            raise StorageError()
        self.uploads.append((owner_id, upload))
        return f"https://blob.test/{owner_id}/{upload.filename}"


class FakeClock:
    """Controllable timezone-aware UTC clock."""

    def __init__(self, start: datetime.datetime = datetime.datetime(2026, 3, 1, 9, 0, 0, tzinfo=datetime.timezone.utc)):
        self.now = start

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += datetime.timedelta(**kwargs)


# ======================================================================
# Fixtures
# ======================================================================


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def blob_store():
    return FakeBlobStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_file(tmp_path):
    return tmp_path / "session.json"


@pytest.fixture
def session_context(session_file):
    return SessionContext(durable=FileSessionStore(session_file))


@pytest.fixture
def service(db, mailer, blob_store, session_context, clock):
    return AuthService(db, mailer=mailer, blob_store=blob_store, session_context=session_context, clock=clock)


@pytest.fixture
def registered_user(service):
    """A signed-up (not signed-in) account with password ``password123``."""
    result = service.sign_up(UserCreate(
        email="Student@Univ.ac.kr",
        password="password123",
        name="Kim",
        university="IGC",
        gender="female",
    ))
    assert result.ok, result.error
    return result.value
