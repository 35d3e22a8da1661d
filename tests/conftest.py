import pytest
from fastapi.testclient import TestClient

from apps.users_api import UsersService
from apps.users_api.main import create_app
from lib.config.users_api_loader import ServiceConfig


@pytest.fixture
def service():
    return UsersService(config=ServiceConfig())


@pytest.fixture
def client(service):
    with TestClient(create_app(service)) as c:
        yield c
