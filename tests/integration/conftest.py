"""
Integration Test Fixtures.

Each test gets a fresh application with empty repositories and upload
directories under tmp_path, driven through httpx's ASGI transport.
"""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from modules.backend.main import create_app


@pytest.fixture
def app(tmp_path: Path) -> FastAPI:
    """Application with empty in-memory state and uploads under tmp_path."""
    return create_app(media_root=tmp_path)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client bound to the test application.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client


async def register(client: AsyncClient, username: str, password: str = "s3cret", **profile: Any):
    return await client.post(
        "/api/register",
        json={"username": username, "password": password, **profile},
    )


async def login(client: AsyncClient, username: str, password: str = "s3cret") -> str:
    response = await client.post(
        "/api/login",
        json={"username": username, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def auth_headers(client: AsyncClient):
    """
    Register a user, log in and return Authorization headers.

    Usage:
        headers = await auth_headers("ada")
    """
    async def _auth_headers(username: str, password: str = "s3cret", **profile: Any) -> dict[str, str]:
        response = await register(client, username, password, **profile)
        assert response.status_code == 201, response.text
        token = await login(client, username, password)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


class ApiAssertions:
    """Helpers for asserting the shape of error responses."""

    @staticmethod
    def assert_error(response, status_code: int, message: str | None = None) -> dict:
        assert response.status_code == status_code, response.text
        body = response.json()
        assert "message" in body
        if message is not None:
            assert body["message"] == message
        return body


@pytest.fixture
def api() -> ApiAssertions:
    return ApiAssertions()
