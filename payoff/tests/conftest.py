import pytest
from flask.testing import FlaskClient

from payoff.app import create_app


@pytest.fixture()
def app():
    return create_app("testing")


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
