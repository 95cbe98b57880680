import logging

import pytest
from fastapi.testclient import TestClient

from partpicker.app import create_app
from partpicker.catalog import PartCatalog
from partpicker.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from the developer's environment and .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def catalog() -> PartCatalog:
    return PartCatalog()


@pytest.fixture
def client(settings, catalog) -> TestClient:
    """In-process TestClient for the selection page."""
    return TestClient(create_app(settings, catalog))


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
