"""Pytest configuration and shared fixtures."""

# Import all fixtures from fixture modules
pytest_plugins = [
    "tests.fixtures.filesystem",
    "tests.fixtures.tools",
]
