"""Test configuration and fixtures."""

import logfire
import pytest

from discuss.config import Settings
from discuss.domain.service import JWTService

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def jwt_service() -> JWTService:
    """JWT service sharing the default test secret with the app under test."""
    return JWTService(Settings().auth)
