"""Helpers shared by the test suites: live console, browser sessions, test data."""
