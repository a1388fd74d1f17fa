"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing the psychosocial risk
backend. Fixtures build catalogs, engines and survey data directly, so
tests never depend on a local .env file.

Usage:
    def test_example(engine, make_response):
        response = make_response(answers={11: 3})
        result = engine.analyze("sector-1", [response])
"""

import os

import pytest

# Keep test runs off the filesystem log handler
os.environ.setdefault("LOG_TO_FILE", "false")

from skills.psychosocial_risk_engine import (
    DEFAULT_RISK_FACTORS,
    FactorCatalog,
    ProbabilityAssessment,
    PsychosocialRiskEngine,
    ScoringPolicy,
    SurveyResponse,
    build_default_catalog,
)


SECTOR_ID = "sector-1"


# =============================================================================
# CATALOG / ENGINE FIXTURES
# =============================================================================


@pytest.fixture
def catalog():
    """Default nine-factor catalog with no inverted questions."""
    return build_default_catalog()


@pytest.fixture
def inverted_catalog():
    """
    Factory fixture for catalogs with custom inverted questions.

    Usage:
        def test_example(inverted_catalog):
            catalog = inverted_catalog({12, 15})
    """
    def _create_catalog(inverted=()):
        return FactorCatalog(DEFAULT_RISK_FACTORS, inverted_questions=inverted)
    return _create_catalog


@pytest.fixture
def policy():
    return ScoringPolicy()


@pytest.fixture
def engine(catalog, policy):
    """PsychosocialRiskEngine over the default catalog and policy."""
    return PsychosocialRiskEngine(catalog, policy)


# =============================================================================
# SURVEY DATA FIXTURES
# =============================================================================


@pytest.fixture
def make_response():
    """
    Factory fixture for SurveyResponse objects.

    Usage:
        def test_example(make_response):
            response = make_response(answers={1: 4, 2: 0}, job_function="Nurse")
    """
    counter = {"n": 0}

    def _create_response(
        answers=None,
        sector_id: str = SECTOR_ID,
        job_function: str = "Analyst",
        response_id: str | None = None,
    ):
        counter["n"] += 1
        return SurveyResponse(
            id=response_id or f"resp-{counter['n']}",
            sector_id=sector_id,
            job_function=job_function,
            answers=answers or {},
        )
    return _create_response


@pytest.fixture
def uniform_answers():
    """
    Factory fixture: the same answer for every question in a range.

    Usage:
        answers = uniform_answers(3, 11, 20)
    """
    def _create_answers(value: int, start: int = 1, end: int = 90):
        return {q: value for q in range(start, end + 1)}
    return _create_answers


@pytest.fixture
def make_assessment():
    """
    Factory fixture for ProbabilityAssessment objects.

    Usage:
        assessment = make_assessment({2: 1.0})
    """
    def _create_assessment(scores=None, sector_id: str = SECTOR_ID):
        return ProbabilityAssessment(sector_id=sector_id, scores=scores or {})
    return _create_assessment


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def test_container():
    """
    Fresh DependencyContainer, isolated from the process-wide singleton.

    Usage:
        def test_example(test_container):
            engine = test_container.engine
    """
    from app.services.container import DependencyContainer

    return DependencyContainer()


@pytest.fixture
def client(test_container):
    """
    FastAPI TestClient wired to ``test_container``.

    Usage:
        def test_example(client):
            response = client.get("/health")
    """
    from fastapi.testclient import TestClient

    from app.main import app
    from app.services import get_container

    app.dependency_overrides[get_container] = lambda: test_container
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
