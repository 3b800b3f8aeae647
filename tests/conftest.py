import pytest

from app import create_app, shutdown_app
from config import TestingConfig


@pytest.fixture
def subscriptions_file(tmp_path):
    return tmp_path / "email_subscriptions.json"


@pytest.fixture
def app(subscriptions_file):
    app = create_app(TestingConfig, SUBSCRIPTIONS_FILE=str(subscriptions_file))
    yield app
    shutdown_app(app)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["subscription_store"]
