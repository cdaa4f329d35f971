"""
Pytest configuration and fixtures for the AssetsManager test suite
"""

import itertools
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from assets_manager.api.main import create_app
from assets_manager.client import AssetsManagerClient
from assets_manager.config.settings import DatabaseConfig, SecurityConfig, Settings
from assets_manager.container import Container
from assets_manager.models.category import Category, Month
from assets_manager.models.entry import FinancialEntry, normalize_amounts

TEST_PASSWORD = "Str0ng!Passw0rd"

_ids = itertools.count(1)


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database file"""
    return Settings(
        database=DatabaseConfig(path=str(tmp_path / "assets_manager_test.db"), connection_timeout=5.0),
        security=SecurityConfig(
            secret_key="test_secret_key_for_testing_only_32_chars",
            session_timeout_minutes=60,
            bcrypt_rounds=4,  # Faster for tests
        ),
    )


@pytest.fixture
def container(test_settings):
    container = Container()
    container.configure(test_settings)
    yield container
    container.cleanup()


@pytest.fixture
def app(test_settings, container):
    return create_app(settings=test_settings, container=container)


@pytest.fixture
def http(app):
    """Raw HTTP client against the in-process API"""
    return TestClient(app)


@pytest.fixture
def make_client(http, test_settings):
    """Factory for store clients sharing the in-process transport"""

    def _make():
        return AssetsManagerClient(base_url="http://testserver", session=http, settings=test_settings)

    return _make


@pytest.fixture
def register(make_client):
    """Sign up a user and return a signed-in client for them"""

    def _register(username="asha_rao", email=None, name="Asha Rao"):
        client = make_client()
        email = email or f"{username}@example.com"
        client.sign_up(email, TEST_PASSWORD, name, username)
        client.sign_in(email, TEST_PASSWORD)
        return client

    return _register


@pytest.fixture
def signed_in_client(register):
    return register()


@pytest.fixture
def make_entry():
    """Build a persisted-looking entry without going through the store"""

    def _make(
        category="Bank Account",
        month="January",
        year=2024,
        cash=0.0,
        investment=0.0,
        current_value=None,
        description=None,
        user_id="user-1",
        entry_id=None,
    ):
        category = Category.parse(category)
        cash, investment, value = normalize_amounts(category, cash, investment, current_value)
        return FinancialEntry(
            id=entry_id or f"entry-{next(_ids)}",
            user_id=user_id,
            category=category,
            description=description,
            amount=cash + investment,
            cash=cash,
            investment=investment,
            current_value=value,
            month=Month.parse(month),
            year=year,
            date_added=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _make
