import os
import tempfile

# 설정은 import 시점에 읽히므로 app import 전에 환경변수 지정
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789-abcdefghij")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="photo_api_logs_"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from photo_api.core.security import create_access_token
from photo_api.database import Base, get_db
from photo_api.models.category import Category
from photo_api.models.user import User


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
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice(db_session):
    user = User(email="alice@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def bob(db_session):
    user = User(email="bob@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def landscape(db_session):
    category = Category(name="Landscape")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


def auth_headers(user) -> dict:
    token = create_access_token(data={"sub": user.email, "user_id": user.id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_headers(alice):
    return auth_headers(alice)


@pytest.fixture
def bob_headers(bob):
    return auth_headers(bob)


@pytest.fixture
def make_headers():
    return auth_headers


@pytest.fixture
def create_photo(client, alice_headers, landscape):
    """API로 사진 등록 후 응답의 photo 반환"""
    def _create(owner, **overrides):
        body = {
            "categoryId": landscape.id,
            "path": "uploads/photos/sunset.jpg",
            "title": "Sunset",
            "desc": "Evening at the beach",
            "userId": owner.id,
        }
        body.update(overrides)
        response = client.post("/api/photo/", json=body, headers=alice_headers)
        assert response.status_code == 200, response.text
        return response.json()["photo"]
    return _create
