"""
Shared pytest fixtures and configuration for petclinic tests.

This module provides:
- structlog reset + correlation context cleanup for test isolation
- ``log_output``: captured log events, with correlation context merged in
- Sample pets

Usage:
    def test_something(log_output, pet):
        ...
        assert log_output.entries[0]["event"] == "pet_saved"
"""

from pathlib import Path

import pytest
import structlog
from structlog.testing import LogCapture

import petclinic.core.logging as petclinic_logging
from petclinic.core.settings import get_settings
from petclinic.domain.pet import Owner, Pet, PetType


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "cli" in test_path.parts or "sqlite" in test_path.name:
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_logging_state():
    """Reset structlog config, bound context and cached settings around each test."""
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    petclinic_logging._configured = False
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    petclinic_logging._configured = False
    get_settings.cache_clear()


# =============================================================================
# Log capture
# =============================================================================


@pytest.fixture
def log_output() -> LogCapture:
    """Capture log events as dicts, including correlation context."""
    capture = LogCapture()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, capture],
        cache_logger_on_first_use=False,
    )
    return capture


# =============================================================================
# Sample data
# =============================================================================


@pytest.fixture
def pet() -> Pet:
    return Pet(
        identification_number="42",
        name="Rex",
        type=PetType("Dog"),
        owner=Owner("Ash", "Ketchum"),
    )
