import os

# Settings are read at import time; required values must exist first.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.core.auth import create_access_token
from app.core.storage_utils import UploadStorage, get_upload_storage
from app.database import get_session
from app.main import app
from app.models.category import Category
from app.models.product import Product


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    """Session shared by the API (via override) and the test body."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def storage(upload_dir):
    return UploadStorage(upload_dir, "/public/uploads")


@pytest.fixture
async def client(session, storage):
    """Async test client wired to the in-memory DB and a temp upload dir."""
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_upload_storage] = lambda: storage

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token({"userId": "admin-1", "isAdmin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token({"userId": "user-1", "isAdmin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_category(session):
    def _make(name: str = "Shirts", **kwargs) -> Category:
        category = Category(name=name, **kwargs)
        session.add(category)
        session.commit()
        session.refresh(category)
        return category

    return _make


@pytest.fixture
def make_product(session):
    def _make(category: Category | None = None, **kwargs) -> Product:
        values = {
            "name": "Plain tee",
            "description": "Cotton t-shirt",
            "image": "http://test/public/uploads/tee.png",
            "price": 10.0,
            "count_in_stock": 3,
        }
        values.update(kwargs)
        product = Product(
            category_id=category.id if category else None,
            **values,
        )
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make


@pytest.fixture
def product_form():
    """Build the multipart fields of a product form."""

    def _form(category_id, **overrides) -> dict[str, str]:
        data = {
            "name": "Shirt",
            "description": "A plain shirt",
            "price": "20",
            "category": str(category_id),
            "countInStock": "5",
        }
        data.update({k: str(v) for k, v in overrides.items()})
        return data

    return _form
