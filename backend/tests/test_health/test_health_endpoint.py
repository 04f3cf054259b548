"""Tests for the health check endpoint."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from chipcalc.config import settings
from chipcalc.dal.chip_sets_dal import ChipSetDAL
from chipcalc.models.chip_set import Denomination


@pytest.mark.asyncio
class TestHealthEndpoint:
    """Test the /health endpoint behavior."""

    async def test_reports_catalogue_counts(self, client, test_db):
        dal = ChipSetDAL(test_db)
        denoms = [Denomination(value=25, quantity=40, color="#22C55E")]
        await dal.create("Standard", denoms, is_preset=True)
        await dal.create("Home", denoms)

        with patch('chipcalc.routes.health.get_database', return_value=test_db):
            response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == settings.APP_VERSION
        assert data["checks"]["database"] == "ok"
        assert data["checks"]["catalogue"] == {"chip_sets": 2, "presets": 1}

    async def test_empty_catalogue_is_still_healthy(self, client, test_db):
        with patch('chipcalc.routes.health.get_database', return_value=test_db):
            response = await client.get("/health")

        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["catalogue"] == {"chip_sets": 0, "presets": 0}

    async def test_degraded_when_not_connected(self, client):
        with patch('chipcalc.routes.health.get_database') as mock_get_db:
            mock_get_db.side_effect = RuntimeError("Chip set store is not connected")

            response = await client.get("/health")

            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "degraded"
            assert data["checks"]["database"] == "down"
            assert data["checks"]["catalogue"] is None

    async def test_degraded_when_count_fails(self, client):
        mock_db = MagicMock()
        mock_db.__getitem__.return_value.count_documents = AsyncMock(
            side_effect=TimeoutError("server selection timed out")
        )
        with patch('chipcalc.routes.health.get_database', return_value=mock_db):
            response = await client.get("/health")

        data = response.json()
        assert response.status_code == 200
        assert data["status"] == "degraded"
        assert data["checks"]["database"] == "down"

    async def test_health_endpoint_at_api_prefix(self, client, test_db):
        with patch('chipcalc.routes.health.get_database', return_value=test_db):
            response = await client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_root_endpoint(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "ChipCalc API"
