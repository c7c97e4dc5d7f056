import pytest

from portal import create_app
from portal.config import TestConfig


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    # Cookies are passed explicitly so each request states its own session
    return app.test_client(use_cookies=False)
