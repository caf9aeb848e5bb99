import os
import sys

import pytest
from bs4 import BeautifulSoup

# Ensure repo root is on sys.path so "portfolio" imports work without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture
def app():
    from portfolio import create_app

    cfg = {
        "TESTING": True,
        "SECRET_KEY": "test",
        "LOG_LEVEL": "DEBUG",
    }
    return create_app(cfg)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    """Request context for calling render helpers directly."""
    with app.test_request_context("/") as c:
        yield c


@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s
