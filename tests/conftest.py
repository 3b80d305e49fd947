# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from portfolio_api.core.config import Settings
from portfolio_api.core.security import hash_password
from portfolio_api.main import create_app

from tests.utils import ADMIN_PASSWORD


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATA_DIR=str(tmp_path / "data"),
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'test.db'}",
        ADMIN_PASSWORD_HASH=hash_password(ADMIN_PASSWORD),
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture(params=["file", "database"])
def app(request, settings):
    settings.STORAGE_BACKEND = request.param
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    # In presence mode the server accepts any bearer credential
    return {"Authorization": "Bearer any-session-token"}
