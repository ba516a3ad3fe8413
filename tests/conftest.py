import pytest

from app_config import Config
from database import Database
from debug_logger import DebugLogger
from project_service import ProjectService


@pytest.fixture
def logger():
    return DebugLogger()


@pytest.fixture
def db(tmp_path, logger):
    return Database(str(tmp_path / "customers.db"), logger)


@pytest.fixture
def service(db):
    return ProjectService(db)


@pytest.fixture
def seeded_service(service):
    service.create_and_populate_tables()
    return service


@pytest.fixture
def config(tmp_path):
    config = Config()
    config.db_file = str(tmp_path / "customers.db")
    config.export_directory = str(tmp_path / "output")
    return config


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted lines to input(); call with the lines to type."""
    def feed(*lines):
        remaining = iter(lines)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(remaining))
    return feed
