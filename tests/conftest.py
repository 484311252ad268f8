import pytest

from price_store import PriceStore, create_app


@pytest.fixture
def store() -> PriceStore:
    return PriceStore()


@pytest.fixture
def app(store):
    app = create_app(store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
