"""
Pytest configuration and fixtures: fresh in-memory sessions and an API client per test.
"""
import pytest
from fastapi.testclient import TestClient

from claro_inventory.db.session import build_session
from claro_inventory.main import create_app


@pytest.fixture
def session():
    """Session seeded with the demo inventory."""
    return build_session(seed_demo_data=True)


@pytest.fixture
def empty_session():
    """Session with reference data but no assets, RMA records or materials."""
    return build_session(seed_demo_data=False)


@pytest.fixture
def client(session):
    """API client bound to the seeded `session` fixture."""
    with TestClient(create_app(session)) as test_client:
        yield test_client
