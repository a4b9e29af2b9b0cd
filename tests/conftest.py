"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at a throwaway in-memory SQLite database before it is imported.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["MAIL_BACKEND"] = "console"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "test-admin-password"
os.environ["SESSION_SECRET_KEY"] = "test-session-secret"
os.environ["LOG_LEVEL"] = "WARNING"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def fresh_database():
    """Empty schema for every test; also drops any admin session cookie."""
    from domain.models import Base, engine
    from test_fixtures import client

    Base.metadata.create_all(bind=engine)
    client.cookies.clear()
    yield
    client.cookies.clear()
    Base.metadata.drop_all(bind=engine)
