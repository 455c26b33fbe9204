"""Pytest configuration and shared fixtures."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from delivery_tracker.config.database import get_db
from delivery_tracker.config.settings import Settings, get_settings
from delivery_tracker.main import app
from delivery_tracker.shared.database.models import Base, Package, GeoLocation


TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture
def engine():
    """In-memory SQLite shared across connections."""
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
def db_session(engine):
    """Session bound to the test database."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_settings():
    """Settings with a known key and the default credential pair."""
    return Settings(
        secret_key=TEST_SECRET_KEY,
        algorithm="HS512",
        access_token_expire_seconds=3600,
        auth_username="admin",
        auth_password="password",
    )


@pytest.fixture
def make_package(db_session):
    """Factory that stores a package, with or without a delivery address."""
    def _make(consignment_number, consignee_name, latitude=None, longitude=None):
        address = None
        if latitude is not None and longitude is not None:
            address = GeoLocation(latitude=latitude, longitude=longitude)
        package = Package(
            consignment_number=consignment_number,
            consignee_name=consignee_name,
            delivery_address=address,
        )
        db_session.add(package)
        db_session.commit()
        return package
    return _make


@pytest.fixture
def test_client(db_session, test_settings):
    """FastAPI test client wired to the test database and settings."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    # Unhandled errors must come back as 500 responses, not raise in the test
    client = TestClient(app, raise_server_exceptions=False)
    yield client

    app.dependency_overrides.clear()
