"""Integration tests for the assembled application."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from strings_server.app import create_app
from strings_server.config import Settings


class TestUppercaseAPI:
    """Test POST /uppercase."""

    def test_uppercases(self, client):
        response = client.post("/uppercase", json={"s": "hello"})

        assert response.status_code == 200
        assert response.json() == {"s": "HELLO", "err": ""}

    def test_empty_string_is_a_business_error(self, client):
        response = client.post("/uppercase", json={"s": ""})

        assert response.status_code == 200
        assert response.json() == {"s": "", "err": "empty string"}

    def test_malformed_body(self, client):
        response = client.post("/uppercase", content=b"not json")

        assert response.status_code == 400
        assert "detail" in response.json()

    def test_mixed_case(self, client):
        response = client.post("/uppercase", json={"s": "MiXeD"})

        assert response.status_code == 200
        assert response.json() == {"s": "MIXED", "err": ""}

    def test_get_is_not_allowed(self, client):
        assert client.get("/uppercase").status_code == 405

    def test_request_id_is_echoed(self, client):
        response = client.post("/uppercase", json={"s": "a"}, headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

    def test_request_id_is_generated(self, client):
        first = client.post("/uppercase", json={"s": "a"})
        second = client.post("/uppercase", content=b"not json")

        assert first.headers["X-Request-ID"]
        assert second.headers["X-Request-ID"]
        assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


class TestPingAPI:
    def test_ping(self, client):
        response = client.get("/ping")

        assert response.status_code == 200
        assert response.json() == {"message": "Pong!"}


class TestCreateApp:
    """Test application wiring."""

    def test_defaults_to_basic_service(self):
        with TestClient(create_app()) as client:
            assert client.post("/uppercase", json={"s": "x"}).json() == {"s": "X", "err": ""}

    def test_cors_is_enabled_from_settings(self):
        settings = Settings(CORS_ORIGINS=["http://localhost:3000"])
        client = TestClient(create_app(settings=settings))

        response = client.options(
            "/uppercase",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


@pytest.mark.anyio
async def test_concurrent_requests_do_not_cross_talk(app):
    inputs = [f"input-{i}-abc" for i in range(50)]
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        responses = await asyncio.gather(
            *(client.post("/uppercase", json={"s": s}) for s in inputs)
        )

    for s, response in zip(inputs, responses):
        assert response.status_code == 200
        assert response.json() == {"s": s.upper(), "err": ""}
