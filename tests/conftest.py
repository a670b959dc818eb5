"""
Pytest configuration and fixtures for all tests.
"""

import os

import pytest

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.pop('TLD_FILE', None)

from mailguard.verifier import EmailValidator, TldRegistry, reset_default_validator  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_default_validator():
    """Drop the lazily built default validator around every test."""
    reset_default_validator()
    yield
    reset_default_validator()


@pytest.fixture
def small_registry():
    """A tiny deterministic registry."""
    return TldRegistry(["com", "co", "org", "uk", "xn--p1ai"], source="test")


@pytest.fixture
def small_validator(small_registry):
    return EmailValidator(small_registry)
