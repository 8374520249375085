"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from strings_server.app import create_app
from strings_server.service import BasicStringService


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def service():
    return BasicStringService()


@pytest.fixture
def app(service):
    return create_app(service)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
