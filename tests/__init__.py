"""
Test suite for the console E2E project.

This package contains:
- unit/: configuration and stub console models
- integration/: stub console views and API via the Flask test client and real HTTP
- e2e/: Playwright scenarios, page objects and console helpers
"""
