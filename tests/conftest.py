import pytest
from fastapi.testclient import TestClient

from customer_record_api.app.core.config import Settings
from customer_record_api.app.core.db import CustomerStore
from customer_record_api.app.main import create_app


def customer_payload(**overrides):
    payload = {
        "first_name": "Ann",
        "last_name": "Lee",
        "phone_number": "5551234567",
        "email": "a@b.com",
        "address": "1 Main St",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def app():
    return create_app(Settings(database_url=":memory:"))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    customer_store = CustomerStore(":memory:").open()
    yield customer_store
    customer_store.close()
