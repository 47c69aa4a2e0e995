"""Test helpers for projects that use envlayers.

The fixtures live in ``envlayers.testing.pytest_fixtures`` and are enabled
from a conftest.py:

    pytest_plugins = ["envlayers.testing.pytest_fixtures"]

Importing this package requires pytest.
"""

from envlayers.testing.pytest_fixtures import EnvFileWriter, preserved_environ

__all__ = [
    "EnvFileWriter",
    "preserved_environ",
]
