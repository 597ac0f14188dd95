"""
HTTP-level tests for /api/auth/* against an in-memory database.
"""

import pytest

from auth.jwt import TokenIssuer
from config.settings import config

ANN = {"email": "a@b.com", "name": "Ann", "password": "Passw0rd!"}


async def _signup(client, body=None):
    return await client.post("/api/auth/signup", json=body or ANN)


class TestSignupRoute:
    @pytest.mark.asyncio
    async def test_created(self, http_client):
        res = await _signup(http_client)

        assert res.status_code == 201
        body = res.json()
        assert body["access_token"]
        assert set(body["user"]) == {"id", "email", "name"}
        assert body["user"]["email"] == "a@b.com"
        assert body["user"]["name"] == "Ann"
        assert "password" not in res.text

    @pytest.mark.asyncio
    async def test_duplicate_email_conflict(self, http_client):
        assert (await _signup(http_client)).status_code == 201

        res = await _signup(http_client)

        assert res.status_code == 409
        assert res.json()["message"] == "User already exists with this email"

    @pytest.mark.asyncio
    async def test_email_stored_exactly_as_given(self, http_client):
        body = {"email": "Ann@Example.COM", "name": "Ann", "password": "Passw0rd!"}

        res = await _signup(http_client, body)

        assert res.status_code == 201
        assert res.json()["user"]["email"] == "Ann@Example.COM"
        same = await http_client.post(
            "/api/auth/signin", json={"email": "Ann@Example.COM", "password": "Passw0rd!"}
        )
        assert same.status_code == 200
        assert same.json()["user"]["email"] == "Ann@Example.COM"
        other_case = await http_client.post(
            "/api/auth/signin", json={"email": "ann@example.com", "password": "Passw0rd!"}
        )
        assert other_case.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"email": "invalid-email", "name": "Test User", "password": "Password123!"},
            {"email": "missing@example.com"},
            {"email": "short@example.com", "name": "Test User", "password": "123"},
            {"email": "short@example.com", "name": "Al", "password": "Password123!"},
            {"email": "long@example.com", "name": "Test User", "password": "é" * 40},
        ],
    )
    async def test_validation_failures_are_400(self, http_client, body):
        res = await http_client.post("/api/auth/signup", json=body)
        assert res.status_code == 400
        assert isinstance(res.json()["message"], list)


class TestSigninRoute:
    @pytest.mark.asyncio
    async def test_signin_ok(self, http_client):
        await _signup(http_client)

        res = await http_client.post(
            "/api/auth/signin", json={"email": ANN["email"], "password": ANN["password"]}
        )

        assert res.status_code == 200
        assert res.json()["access_token"]
        assert res.json()["user"]["email"] == "a@b.com"

    @pytest.mark.asyncio
    async def test_failures_are_byte_identical(self, http_client):
        await _signup(http_client)

        unknown = await http_client.post(
            "/api/auth/signin", json={"email": "nonexistent@example.com", "password": "Passw0rd!"}
        )
        wrong = await http_client.post(
            "/api/auth/signin", json={"email": ANN["email"], "password": "wrongpassword"}
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.content == wrong.content
        assert wrong.json()["message"] == "Invalid credentials"


class TestProfileRoute:
    @pytest.mark.asyncio
    async def test_profile_with_signin_token(self, http_client):
        created = (await _signup(http_client)).json()
        token = (
            await http_client.post(
                "/api/auth/signin", json={"email": ANN["email"], "password": ANN["password"]}
            )
        ).json()["access_token"]

        res = await http_client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})

        assert res.status_code == 200
        assert res.json() == created["user"]

    @pytest.mark.asyncio
    async def test_no_header(self, http_client):
        assert (await http_client.get("/api/auth/profile")).status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header",
        ["Bearer invalid-token", "Basic dXNlcjpwYXNz", "Bearer"],
    )
    async def test_bad_header(self, http_client, header):
        res = await http_client.get("/api/auth/profile", headers={"Authorization": header})
        assert res.status_code == 401
        assert res.json()["statusCode"] == 401

    @pytest.mark.asyncio
    async def test_expired_token(self, http_client):
        created = (await _signup(http_client)).json()
        expired = TokenIssuer(config.jwt_secret, expiry_seconds=-1).issue(
            created["user"]["id"], created["user"]["email"]
        )
        res = await http_client.get("/api/auth/profile", headers={"Authorization": f"Bearer {expired}"})
        assert res.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_token_for_unknown_user(self, http_client):
        token = TokenIssuer(config.jwt_secret, 3600).issue(
            "00000000-0000-0000-0000-000000000000", "ghost@example.com"
        )
        res = await http_client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401
        assert res.json()["message"] == "User not found"
