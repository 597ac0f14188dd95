"""
Tests for the status / health endpoints, error shape and middleware.
"""

from datetime import datetime

import pytest


class TestStatusRoutes:
    @pytest.mark.asyncio
    async def test_server_status(self, http_client):
        res = await http_client.get("/api")

        assert res.status_code == 200
        assert res.headers["content-type"].startswith("application/json")
        body = res.json()
        assert body["status"] == "running"
        assert datetime.fromisoformat(body["timestamp"])
        assert isinstance(body["uptime"], float) or isinstance(body["uptime"], int)
        assert body["environment"] in {"development", "production", "test"}
        assert body["platform"] in {"linux", "darwin", "windows"}
        assert body["throttle"] == {"enabled": True, "ttl": 60, "limit": 10}

    @pytest.mark.asyncio
    async def test_status_is_consistent(self, http_client):
        first = (await http_client.get("/api")).json()
        second = (await http_client.get("/api")).json()

        assert first["status"] == second["status"]
        assert first["environment"] == second["environment"]
        assert second["uptime"] >= first["uptime"]

    @pytest.mark.asyncio
    async def test_health(self, http_client):
        res = await http_client.get("/api/health")
        assert res.status_code == 200
        assert res.json()["status"] == "healthy"
        assert datetime.fromisoformat(res.json()["timestamp"])

    @pytest.mark.asyncio
    async def test_unknown_route_404(self, http_client):
        res = await http_client.get("/api/non-existent-route")
        assert res.status_code == 404
        assert res.json()["statusCode"] == 404

    @pytest.mark.asyncio
    async def test_process_time_header(self, http_client):
        res = await http_client.get("/api/health")
        assert float(res.headers["x-process-time"]) >= 0
