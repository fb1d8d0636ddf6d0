"""
Pytest configuration for Tubely tests
"""

import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tubely.api.deps import get_thumbnail_store, get_upload_service
from tubely.core.auth import make_jwt
from tubely.core.config import settings
from tubely.core.database import Base, get_db
from tubely.main import app
from tubely.models import Video  # noqa: F401
from tubely.services.thumbnail_store import ThumbnailStore
from tubely.services.uploader import FileUploader, FileUploadService

TEST_BUCKET_URL = "https://test-bucket.s3.us-east-1.amazonaws.com"


@pytest.fixture
def bucket_url():
    return TEST_BUCKET_URL


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def thumbnail_store(tmp_path):
    return ThumbnailStore(str(tmp_path / "assets"))


@pytest.fixture
def upload_temp_dir(tmp_path):
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    return temp_dir


@pytest.fixture
def fake_uploader():
    """Object store stand-in that accepts every upload"""
    uploader = Mock(spec=FileUploader)
    uploader.upload.return_value = True
    uploader.public_url.side_effect = lambda key: f"{TEST_BUCKET_URL}/{key}"
    return uploader


@pytest.fixture
def upload_service(fake_uploader, upload_temp_dir):
    return FileUploadService(fake_uploader, str(upload_temp_dir))


@pytest.fixture
def client(session_factory, thumbnail_store, upload_service):
    """Test client wired to the test database and storage"""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_thumbnail_store] = lambda: thumbnail_store
    app.dependency_overrides[get_upload_service] = lambda: upload_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def owner_id():
    return "7d1b3c1e-0000-4000-8000-000000000001"


@pytest.fixture
def other_user_id():
    return "7d1b3c1e-0000-4000-8000-000000000002"


@pytest.fixture
def owner_headers(owner_id):
    return {"Authorization": f"Bearer {make_jwt(owner_id, settings.jwt_secret)}"}


@pytest.fixture
def other_user_headers(other_user_id):
    return {"Authorization": f"Bearer {make_jwt(other_user_id, settings.jwt_secret)}"}
