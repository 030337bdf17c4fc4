import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db
from app.main import app
from app.models.user import User
from app.models.project import Project
from app.services.auth_service import hash_password

TEST_DB_URL = "sqlite:///./test_devconnect.db"
TEST_PASSWORD = "password123"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "alice": User(name="Alice", email="alice@example.com", password_hash=hash_password(TEST_PASSWORD),
                      bio="React developer"),
        "bob": User(name="Bob", email="bob@example.com", password_hash=hash_password(TEST_PASSWORD),
                    bio="Backend engineer"),
        "carol": User(name="Carol", email="carol@example.com", password_hash=hash_password(TEST_PASSWORD)),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_project(db, seed_users):
    project = Project(
        title="Foo",
        description="Bar",
        technologies_json='["Python", "FastAPI"]',
        user_id=seed_users["alice"].user_id,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def get_token(client, email: str, password: str = TEST_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email)}"}
