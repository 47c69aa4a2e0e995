"""Shared pytest configuration for envlayers tests."""

pytest_plugins = ["envlayers.testing.pytest_fixtures"]
