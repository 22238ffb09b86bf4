"""
Test fixtures for the BrandsBridge backend.

Provides:
- In-memory SQLite database, recreated for every test
- TestClient with the database and upload directory overridden
- Authenticated headers for a super admin and an editor
- Factories for catalog entities
"""
# IMPORTANT: Set environment variables BEFORE any other imports
import os
import tempfile

os.environ["ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="brandsbridge-uploads-")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import brandsbridge.models  # noqa: F401 - register tables on the metadata
from brandsbridge.main import app
from brandsbridge.api.deps import get_db, get_upload_dir, access_security
from brandsbridge.core.security import hash_password
from brandsbridge.models import Brand, Category, Product, User, UserRole

TEST_PASSWORD = "secret123"


test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    echo=False,
)


@pytest.fixture
def session():
    """Fresh schema for each test; dropped afterwards."""
    SQLModel.metadata.create_all(test_engine)
    with Session(test_engine) as session:
        yield session
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def upload_dir(tmp_path):
    return str(tmp_path / "uploads")


@pytest.fixture
def client(session: Session, upload_dir: str):
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upload_dir] = lambda: upload_dir

    yield TestClient(app)

    app.dependency_overrides.clear()


# --- Users and auth ---

def make_user(session: Session, email: str, role: UserRole, is_active: bool = True) -> User:
    user = User(
        email=email,
        password_hash=hash_password(TEST_PASSWORD),
        first_name="Test",
        last_name=role.value.title(),
        role=role,
        is_active=is_active,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    token = access_security.create_access_token(subject={"id": user.id, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(session: Session) -> User:
    return make_user(session, "admin@brandsbridgeintl.com", UserRole.SUPER_ADMIN)


@pytest.fixture
def editor_user(session: Session) -> User:
    return make_user(session, "editor@brandsbridgeintl.com", UserRole.EDITOR)


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    return auth_headers(admin_user)


@pytest.fixture
def editor_headers(editor_user: User) -> dict:
    return auth_headers(editor_user)


# --- Test Data Factories ---

@pytest.fixture
def make_category(session: Session):
    def factory(**overrides) -> Category:
        values = {"name": "Beverages", "slug": "beverages"}
        values.update(overrides)
        category = Category(**values)
        session.add(category)
        session.commit()
        session.refresh(category)
        return category
    return factory


@pytest.fixture
def make_brand(session: Session):
    def factory(**overrides) -> Brand:
        values = {"name": "Nestlé", "slug": "nestle"}
        values.update(overrides)
        brand = Brand(**values)
        session.add(brand)
        session.commit()
        session.refresh(brand)
        return brand
    return factory


@pytest.fixture
def make_product(session: Session):
    def factory(**overrides) -> Product:
        values = {"name": "Kit Kat", "slug": "kit-kat"}
        values.update(overrides)
        product = Product(**values)
        session.add(product)
        session.commit()
        session.refresh(product)
        return product
    return factory
