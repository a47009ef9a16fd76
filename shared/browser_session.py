"""Scoped browser sessions for the E2E suite."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from playwright.sync_api import Page, Playwright

from config import E2EConfig

logger = logging.getLogger(__name__)


@contextmanager
def open_browser_session(playwright: Playwright, config: E2EConfig) -> Generator[Page, None, None]:
    """
    Launch one browser of the configured kind and yield a page in it.

    The context and browser are closed on every exit path, including
    failed assertions raised inside the ``with`` block, so no browser
    process outlives the test that opened it.

    Args:
        playwright: Running Playwright instance.
        config: E2E environment (browser kind, headless flag, timeouts).

    Yields:
        Page: The session handle the scenario drives.
    """
    browser_type = getattr(playwright, config.browser.engine)
    logger.info(
        "Launching %s (engine=%s, channel=%s)",
        config.browser.name,
        config.browser.engine,
        config.browser.channel,
    )
    browser = browser_type.launch(channel=config.browser.channel, headless=config.headless)
    try:
        context = browser.new_context(ignore_https_errors=True)
        try:
            page = context.new_page()
            page.set_default_timeout(config.lookup_timeout_ms)
            page.set_default_navigation_timeout(config.navigation_timeout_ms)
            yield page
        finally:
            context.close()
    finally:
        browser.close()
        logger.info("Closed %s session", config.browser.name)
