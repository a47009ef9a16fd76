"""
Shared pytest fixtures for the console test suite.

Provides the stub console application and its test client for the unit
and integration suites, and a factory for E2E environment mappings.
"""

import os
from collections.abc import Callable

import pytest
from faker import Faker

# Set testing environment before importing the app
os.environ["FLASK_ENV"] = "testing"

from console_app import create_app
from console_app.models import PROJECT_ADMIN_PASSWORD, PROJECT_ADMIN_USERNAME


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def app():
    """
    Create a stub console for one test.

    Function scope keeps session state and license dismissal from
    leaking between tests.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Stub console fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def logged_in_client(client):
    """Test client whose session belongs to the seeded project administrator."""
    client.post(
        "/login",
        data={"username": PROJECT_ADMIN_USERNAME, "password": PROJECT_ADMIN_PASSWORD},
    )
    return client


# -----------------------------------------------------------------------------
# Environment Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def environment_factory() -> Callable[..., dict[str, str]]:
    """
    Factory for E2E environment mappings.

    Example:
        def test_something(environment_factory):
            env = environment_factory(BROWSER_ENV="firefox")
    """

    def _make(**overrides: str) -> dict[str, str]:
        environ = {
            "BROWSER_ENV": "chrome",
            "LAUNCH_URL": "http://console.example.com:7070/kylin",
            "PROJECT_NAME": "learn_kylin",
            "USERNAME_PROJECT_ADMIN": fake.user_name(),
            "PASSWORD_PROJECT_ADMIN": fake.password(),
        }
        environ.update(overrides)
        return environ

    return _make
