"""Playwright fixtures for the console E2E scenarios."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
from playwright.sync_api import Page, Playwright

from config import CONSOLE_READY_TIMEOUT_SECONDS, E2EConfig
from shared.browser_session import open_browser_session
from shared.live_console import start_stub_console, wait_for_console_ready
from shared.test_helpers import stub_environment
from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.license_box import LicenseBox
from tests.e2e.pages.login_page import LoginPage
from tests.e2e.pages.topbar_page import TopbarPage

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def e2e_config() -> Generator[E2EConfig, None, None]:
    """
    Resolve the console the scenarios run against.

    If LAUNCH_URL is set, use that console with the credentials from the
    environment. Otherwise start a stub console for the session and log
    in with its seeded project administrator.
    """
    if os.getenv("LAUNCH_URL"):
        config = E2EConfig.from_env()
        wait_for_console_ready(config.launch_url, timeout=CONSOLE_READY_TIMEOUT_SECONDS)
        yield config
        return

    stub = start_stub_console()
    try:
        yield E2EConfig.from_env(stub_environment(stub.url, os.environ))
    finally:
        stub.shutdown()


@pytest.fixture(scope="function")
def driver(playwright: Playwright, e2e_config: E2EConfig) -> Generator[Page, None, None]:
    """
    Open a fresh browser session for one test and close it afterwards.

    Nothing is shared between tests: each gets its own browser, context
    and page, released even when the test fails.
    """
    with open_browser_session(playwright, e2e_config) as page:
        yield page


@pytest.fixture
def login_page(driver: Page, e2e_config: E2EConfig) -> LoginPage:
    return LoginPage(driver, e2e_config.launch_url)


@pytest.fixture
def topbar(driver: Page, e2e_config: E2EConfig) -> TopbarPage:
    return TopbarPage(driver, e2e_config.launch_url)


@pytest.fixture
def license_box(driver: Page) -> LicenseBox:
    return LicenseBox(driver)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("driver")
        if page and not page.is_closed():
            test_name = item.name.replace("/", "_").replace("::", "_")
            try:
                screenshot_path = BasePage(page).take_screenshot(test_name)
                logger.info("Screenshot saved: %s", screenshot_path)
            except Exception as exc:  # pragma: no cover - best effort logging
                logger.warning("Failed to capture screenshot: %s", exc)
