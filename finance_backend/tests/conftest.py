from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from finance_backend.app import create_app
from finance_backend.core.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(PROJECT_NAME="calc-test", LOG_LEVEL="WARNING"))
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
