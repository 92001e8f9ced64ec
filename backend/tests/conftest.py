import os
import tempfile

# must happen before app.config is imported
_DB_FILE = os.path.join(tempfile.mkdtemp(prefix="product_api_"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_FILE}"

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.db import Database
from app.main import create_app
from app.models.product import Product


@pytest.fixture(scope="session")
def database():
    database = Database(settings.database_url)
    database.init_db(reset=True)
    yield database
    database.dispose()


@pytest.fixture(autouse=True)
def clean_table(database):
    database.clear_products()
    yield


@pytest.fixture(scope="session")
def client(database):
    return TestClient(create_app(database))


@pytest.fixture
def db(database):
    s = database.session()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def add_products(database):
    """Insert products "Product 0".."Product N-1" priced (i + 1) * 10."""

    def _add(count: int = 1):
        count = max(count, 1)
        s = database.session()
        try:
            for i in range(count):
                s.add(Product(name=f"Product {i}", price=(i + 1) * 10))
            s.commit()
        finally:
            s.close()

    return _add
