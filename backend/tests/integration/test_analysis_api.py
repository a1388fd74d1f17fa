"""
Integration tests for the diagnostic HTTP API.

Exercises the FastAPI app end to end: request validation, engine wiring
and error mapping.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.services import get_container
from skills.psychosocial_risk_engine import EmptyFactorListError


def _answers(value: int, start: int, end: int) -> dict:
    return {str(q): value for q in range(start, end + 1)}


def _workload_payload(**extra) -> dict:
    payload = {
        "sector_id": "sector-1",
        "sector_name": "Customer Service",
        "elaboration_date": "2025-03-01",
        "responses": [
            {"id": "a", "sector_id": "sector-1", "job_function": "Agent",
             "answers": _answers(3, 11, 20)},
            {"id": "b", "sector_id": "sector-1", "job_function": "Supervisor",
             "answers": _answers(1, 11, 20)},
        ],
    }
    payload.update(extra)
    return payload


@pytest.mark.integration
class TestHealthAndCatalog:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_factors_endpoint_lists_catalog(self, client):
        response = client.get("/api/factors")

        assert response.status_code == 200
        body = response.json()
        assert len(body["factors"]) == 9
        assert body["factors"][1]["key"] == "workload"
        assert body["factors"][1]["start_question"] == 11
        assert body["questions_per_factor"] == 10


@pytest.mark.integration
class TestSectorAnalysisEndpoint:

    def test_workload_scenario(self, client):
        response = client.post("/api/analysis/sector", json=_workload_payload())

        assert response.status_code == 200
        body = response.json()
        workload = body["analysis"]["factors"][1]

        assert body["sector_name"] == "Customer Service"
        assert body["elaboration_date"] == "2025-03-01"
        assert workload["severity_score"] == 2.0
        assert workload["severity_level"] == "medium"
        assert workload["probability_score"] == 2.5
        assert workload["probability_source"] == "automatic"
        assert workload["risk_level"] == "medium"
        assert body["analysis"]["severity_stats"]["total"] == 9
        assert body["analysis"]["risk_stats"]["total"] == 9
        assert body["analysis"]["job_functions"] == ["Agent", "Supervisor"]
        assert body["risk_colors"]["2"] == "yellow"

    def test_external_probability(self, client):
        payload = _workload_payload(
            responses=[{"id": "a", "sector_id": "sector-1", "answers": _answers(4, 11, 20)}],
            probability={"sector_id": "sector-1", "scores": {"2": 1}},
        )

        response = client.post("/api/analysis/sector", json=payload)

        workload = response.json()["analysis"]["factors"][1]
        assert workload["severity_level"] == "high"
        assert workload["probability_level"] == "low"
        assert workload["probability_source"] == "external"
        assert workload["risk_level"] == "medium"

    def test_empty_sector_is_reported_as_low_confidence(self, client):
        response = client.post("/api/analysis/sector", json={"sector_id": "sector-1"})

        assert response.status_code == 200
        analysis = response.json()["analysis"]
        assert analysis["low_confidence"] is True
        assert analysis["severity_stats"]["low"] == 9

    def test_out_of_range_probability_is_rejected(self, client):
        payload = _workload_payload(probability={"sector_id": "sector-1", "scores": {"2": 7}})

        response = client.post("/api/analysis/sector", json=payload)

        assert response.status_code == 422

    def test_unknown_factor_id_in_assessment_is_rejected(self, client):
        payload = _workload_payload(
            probability={"sector_id": "sector-1", "scores": {"2": 1, "0": 1, "42": 2}},
        )

        response = client.post("/api/analysis/sector", json=payload)

        assert response.status_code == 422
        assert "[0, 42]" in response.json()["detail"]

    def test_narrative_sections_are_echoed(self, client):
        payload = _workload_payload(
            hazard_sources={"2": "Queue peaks after 6pm"},
            conclusion="Reassess in 90 days",
        )

        response = client.post("/api/analysis/sector", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["hazard_sources"] == {"2": "Queue peaks after 6pm"}
        assert body["conclusion"] == "Reassess in 90 days"
        assert body["health_effects"] is None

    def test_out_of_range_answers_are_excluded_not_rejected(self, client):
        payload = _workload_payload(
            responses=[{"id": "a", "sector_id": "sector-1", "answers": {"11": 9, "12": 4}}],
        )

        response = client.post("/api/analysis/sector", json=payload)

        assert response.status_code == 200
        analysis = response.json()["analysis"]
        assert analysis["rejected_answers"] == 1
        assert analysis["factors"][1]["severity_score"] == 4.0

    def test_engine_error_maps_to_422(self, client, test_container):
        test_container.analysis_service.engine = _FailingEngine(EmptyFactorListError())

        response = client.post("/api/analysis/sector", json=_workload_payload())

        assert response.status_code == 422
        assert "vacía" in response.json()["detail"]

    def test_unexpected_error_maps_to_500(self, client, test_container):
        test_container.analysis_service.engine = _FailingEngine(RuntimeError("disk on fire"))

        response = client.post("/api/analysis/sector", json=_workload_payload())

        assert response.status_code == 500
        assert "Error procesando análisis" in response.json()["detail"]


class _FailingEngine:
    def __init__(self, error: Exception):
        self._error = error

    def analyze(self, *args, **kwargs):
        raise self._error


@pytest.mark.integration
@pytest.mark.asyncio
class TestAsyncClient:

    async def test_analysis_is_idempotent(self, test_container):
        app.dependency_overrides[get_container] = lambda: test_container
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                first = await client.post("/api/analysis/sector", json=_workload_payload())
                second = await client.post("/api/analysis/sector", json=_workload_payload())
        finally:
            app.dependency_overrides.clear()

        assert first.status_code == 200
        assert first.json() == second.json()
