"""Shared fixtures for the docuri test suite."""

import pytest


@pytest.fixture(autouse=True)
def posix_platform(monkeypatch):
    """Pin path conventions to POSIX unless a test overrides them."""
    monkeypatch.setenv("DOCURI_PLATFORM", "posix")
