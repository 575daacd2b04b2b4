import os
import tempfile
import uuid

# Point the app at a throwaway SQLite database before anything imports core.database
_db_dir = tempfile.mkdtemp(prefix="verification-codes-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"

import pytest

from core.config import VerificationCodeConfig
from core.database import Base, SessionLocal, engine
from models import verification_code  # noqa: F401

Base.metadata.create_all(bind=engine)


class FakeNotifier:
    """Records notifications instead of delivering them."""

    def __init__(self):
        self.sent = []

    def send(self, verifiable, notification):
        self.sent.append((verifiable, notification))


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def make_config():
    def _make(**overrides):
        return VerificationCodeConfig(**overrides)
    return _make


@pytest.fixture
def email():
    return f"{uuid.uuid4().hex[:12]}@example.com"
