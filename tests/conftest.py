"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from tictactoe_backend.api.app import create_app
from tictactoe_backend.core.config import Settings
from tictactoe_backend.registry.memory_registry import InMemoryGameRegistry
from tictactoe_backend.services.game_service import GameService


@pytest.fixture
def registry() -> InMemoryGameRegistry:
    """Fresh registry for every test, so tests stay independent of each other."""
    return InMemoryGameRegistry()


@pytest.fixture
def service(registry: InMemoryGameRegistry) -> GameService:
    return GameService(registry)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Application with its own (empty) registry, so games created in one test never leak into another."""
    app = create_app(Settings(cors_origins=["http://localhost:3000"]))
    with TestClient(app) as test_client:
        yield test_client
