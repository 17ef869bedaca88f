"""
Integration Tests for Registration and Login.
"""

import pytest
from httpx import AsyncClient

from modules.backend.core.security import verify_token


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_returns_201(self, client: AsyncClient):
        response = await client.post(
            "/api/register",
            json={"username": "ada", "password": "s3cret", "fullName": "Ada Lovelace"},
        )

        assert response.status_code == 201
        assert response.json() == {"message": "User registered successfully"}

    @pytest.mark.asyncio
    async def test_duplicate_username_returns_400(self, client: AsyncClient, api):
        await client.post("/api/register", json={"username": "ada", "password": "one"})

        response = await client.post("/api/register", json={"username": "ada", "password": "two"})

        api.assert_error(response, 400, "Username already exists")

    @pytest.mark.asyncio
    async def test_missing_password_returns_422(self, client: AsyncClient):
        response = await client.post("/api/register", json={"username": "ada"})

        assert response.status_code == 422
        assert response.json()["code"] == "VAL_REQUEST_INVALID"

    @pytest.mark.asyncio
    async def test_profile_fields_are_listed(self, client: AsyncClient):
        await client.post(
            "/api/register",
            json={"username": "ada", "password": "s3cret", "fullName": "Ada Lovelace", "birthYear": 1815},
        )

        users = (await client.get("/api/users")).json()

        assert users[0]["fullName"] == "Ada Lovelace"
        assert users[0]["birthYear"] == 1815


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_returns_token_for_username(self, client: AsyncClient):
        await client.post("/api/register", json={"username": "ada", "password": "s3cret"})

        response = await client.post("/api/login", json={"username": "ada", "password": "s3cret"})

        assert response.status_code == 200
        assert verify_token(response.json()["token"]) == "ada"

    @pytest.mark.asyncio
    async def test_wrong_password_returns_401(self, client: AsyncClient, api):
        await client.post("/api/register", json={"username": "ada", "password": "s3cret"})

        response = await client.post("/api/login", json={"username": "ada", "password": "nope"})

        api.assert_error(response, 401, "Invalid credentials")

    @pytest.mark.asyncio
    async def test_unknown_user_returns_404(self, client: AsyncClient, api):
        response = await client.post("/api/login", json={"username": "ghost", "password": "x"})

        api.assert_error(response, 404, "User not found")
