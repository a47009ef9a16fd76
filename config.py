"""
Configuration module for the console E2E suite.

Two kinds of configuration live here:

1. Flask configuration classes for the stub console (development and
   testing), selected by ``get_config`` the usual way.
2. ``E2EConfig``, the environment the browser scenarios run against
   (browser kind, launch URL, project and admin credentials). It is read
   once from environment variables and is immutable afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class ConfigurationError(Exception):
    """Raised when the E2E environment is missing or has invalid values."""


# -----------------------------------------------------------------------------
# Stub console (Flask) configuration
# -----------------------------------------------------------------------------

class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "console-stub-dev-secret")

    # Project every seeded account belongs to
    CONSOLE_PROJECT_NAME: str = os.environ.get("CONSOLE_PROJECT_NAME", "learn_kylin")

    # Show the license dialog right after login
    CONSOLE_LICENSE_NOTICE: bool = (
        os.environ.get("CONSOLE_LICENSE_NOTICE", "true").strip().lower() == "true"
    )


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = False
    TESTING: bool = True


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])


# -----------------------------------------------------------------------------
# E2E environment
# -----------------------------------------------------------------------------

VIEWPORT_WIDTH = 1440
VIEWPORT_HEIGHT = 828
SETTLE_DELAY_MS = 2000
LOOKUP_TIMEOUT_MS = 5000
NAVIGATION_TIMEOUT_MS = 15000
TEST_TIMEOUT_SECONDS = 30
# Wait for a LAUNCH_URL console; must fit inside TEST_TIMEOUT_SECONDS
CONSOLE_READY_TIMEOUT_SECONDS = 20

# BROWSER_ENV value -> (Playwright engine, release channel)
BROWSER_KINDS: dict[str, tuple[str, str | None]] = {
    "chrome": ("chromium", "chrome"),
    "chromium": ("chromium", None),
    "firefox": ("firefox", None),
    "safari": ("webkit", None),
    "webkit": ("webkit", None),
    "edge": ("chromium", "msedge"),
    "microsoftedge": ("chromium", "msedge"),
}

REQUIRED_VARIABLES = (
    "LAUNCH_URL",
    "USERNAME_PROJECT_ADMIN",
    "PASSWORD_PROJECT_ADMIN",
)


@dataclass(frozen=True)
class Credentials:
    """A username/password pair for one console role."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class BrowserKind:
    """Playwright engine and optional branded channel for a browser name."""

    name: str
    engine: str
    channel: str | None = None


def resolve_browser(name: str) -> BrowserKind:
    """
    Map a ``BROWSER_ENV`` value onto a Playwright engine.

    Args:
        name: Browser name such as ``chrome``, ``firefox`` or ``MicrosoftEdge``.

    Returns:
        The resolved browser kind.

    Raises:
        ConfigurationError: If the name is not a supported browser.
    """
    key = name.strip().lower()
    try:
        engine, channel = BROWSER_KINDS[key]
    except KeyError:
        supported = ", ".join(sorted(BROWSER_KINDS))
        raise ConfigurationError(
            f"Unsupported BROWSER_ENV '{name}'; expected one of: {supported}"
        ) from None
    return BrowserKind(name=key, engine=engine, channel=channel)


@dataclass(frozen=True)
class E2EConfig:
    """Read-only environment for one run of the browser scenarios."""

    browser: BrowserKind
    launch_url: str
    project_admin: Credentials
    project_name: str = ""
    headless: bool = True
    viewport: dict[str, int] = field(
        default_factory=lambda: {"width": VIEWPORT_WIDTH, "height": VIEWPORT_HEIGHT}
    )
    settle_delay_ms: int = SETTLE_DELAY_MS
    lookup_timeout_ms: int = LOOKUP_TIMEOUT_MS
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "E2EConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            The populated configuration.

        Raises:
            ConfigurationError: If a required variable is missing or empty,
                or ``BROWSER_ENV`` names an unsupported browser.
        """
        if environ is None:
            environ = os.environ

        missing = [name for name in REQUIRED_VARIABLES if not environ.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing E2E environment variables: {', '.join(missing)}"
            )

        return cls(
            browser=resolve_browser(environ.get("BROWSER_ENV") or "chromium"),
            launch_url=environ["LAUNCH_URL"],
            project_name=environ.get("PROJECT_NAME", ""),
            project_admin=Credentials(
                username=environ["USERNAME_PROJECT_ADMIN"],
                password=environ["PASSWORD_PROJECT_ADMIN"],
            ),
            headless=environ.get("E2E_HEADLESS", "true").strip().lower() != "false",
        )
