"""Pytest configuration for integration tests."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (CLI and installed package data)",
    )


def pytest_collection_modifyitems(config, items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def app_dir(tmp_path, monkeypatch):
    """Empty application directory used as working directory."""
    monkeypatch.chdir(tmp_path)
    # setenv records the original value so teardown undoes .env loading too
    monkeypatch.setenv("APP_ENVIRONMENT", "")
    monkeypatch.delenv("APP_ENVIRONMENT")
    return tmp_path
