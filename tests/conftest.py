"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Isolate tests from cached settings and logging state."""
    from src.config.settings import reset_settings
    from src.relevance.config import reset_relevance_config
    from src.utils.logging import reset_logging

    reset_settings()
    reset_relevance_config()
    yield
    reset_settings()
    reset_relevance_config()
    reset_logging()


@pytest.fixture
def relevance_config():
    """Relevance config with defaults only (no .env)."""
    from src.relevance.config import RelevanceConfig

    return RelevanceConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def scoring_service(relevance_config):
    """Scoring service using default point values and thresholds."""
    from src.relevance.service import RelevanceScoringService

    return RelevanceScoringService(config=relevance_config)


@pytest.fixture
def oncology_expert():
    """Expert with an oncology specialization and cancer-related tags."""
    from src.relevance.models import Expert

    return Expert(
        id="1",
        name="Dr. Sarah Chen",
        specialization="Oncology & Immunotherapy",
        institution="Memorial Sloan Kettering Cancer Center",
        country="United States",
        tags=["Cancer Research", "Immunotherapy", "Clinical Trials"],
    )


@pytest.fixture
def immunotherapy_publication():
    """Publication titled around immunotherapy in cancer."""
    from src.relevance.models import Publication

    return Publication(
        id="pub-2",
        title=(
            "Immunotherapy Combinations in Advanced Cancer: Synergy and "
            "Resistance Mechanisms"
        ),
        authors=["Chen, D.S.", "Mellman, I.", "Wolchok, J.D."],
        tags=["Immunotherapy", "Cancer", "Oncology"],
        year=2024,
    )


@pytest.fixture
def sample_candidates(relevance_config):
    """The bundled sample catalog."""
    from src.relevance.catalog import CatalogService

    return CatalogService(config=relevance_config).sample_catalog()
