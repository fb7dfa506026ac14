import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ["EMAILS_ENABLED"] = "false"
os.environ["LOG_TO_FILE"] = "false"

import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

import main
from app.core.config import settings
from app.core.database import Base, get_db
from app.core.security import token_service
from app.crud.user import user as crud_user
from app.crud.notification import notification as crud_notification
from app.crud.accommodation import accommodation as crud_accommodation

test_db_url = settings.TEST_DATABASE_URL or settings.DATABASE_URL

@pytest.fixture(scope="session")
def database_engine():
    if test_db_url.startswith("sqlite"):
        engine = create_engine(test_db_url, connect_args={"check_same_thread": False})
    else:
        engine = create_engine(test_db_url)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if test_db_url == "sqlite:///./test.db" and os.path.exists("./test.db"):
        os.remove("./test.db")

@pytest.fixture(scope="function")
def db_session(database_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        # services commit, so wipe rows instead of relying on a rollback
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def user_factory(db_session):
    def _user_factory(full_name="Test User", line_manager=None, opt_out=False, is_active=True):
        user_data = {
            "full_name": full_name,
            "email": f"user-{uuid.uuid4().hex[:10]}@company.com",
            "is_active": is_active,
            "line_manager_id": line_manager.id if line_manager else None,
            "email_notification_opt_out": opt_out,
        }
        return crud_user.create(db_session, obj_in=user_data)
    return _user_factory

@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {token_service.issue(user.id)}"}
    return _auth_headers

@pytest.fixture
def manager(user_factory):
    return user_factory(full_name="Grace Manager")

@pytest.fixture
def requester(user_factory, manager):
    return user_factory(full_name="Ada Requester", line_manager=manager)

@pytest.fixture
def notification_factory(db_session):
    def _notification_factory(user, message="Something happened", is_read=False, created_at=None):
        data = {"user_id": user.id, "message": message, "is_read": is_read}
        if created_at is not None:
            data["created_at"] = created_at
        return crud_notification.create(db_session, obj_in=data)
    return _notification_factory

@pytest.fixture
def accommodation(db_session):
    return crud_accommodation.create(db_session, obj_in={
        "country": "Nigeria",
        "city": "Lagos",
        "address": "12 Marina Road",
        "accommodation": "Harbour View Suites",
        "accommodation_type": ["hotel"],
        "room_type": ["single", "double"],
        "num_of_rooms": 40,
        "description": "Business hotel close to the office",
        "facilities": ["wifi", "gym"],
    })

@pytest.fixture
def valid_trip_request(accommodation):
    return {
        "type": "one-way",
        "originCity": "Abuja",
        "destinationCity": "Lagos",
        "departureDate": "2026-11-20",
        "reason": "Quarterly planning with the Lagos team",
        "accommodationId": str(accommodation.id),
    }

