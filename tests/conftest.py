"""Pytest configuration and fixtures."""

import logging
from typing import Any, Dict, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mobile_app_ws.app.core.config import Settings
from mobile_app_ws.app.main import create_app
from mobile_app_ws.app.services.user_repository import UserRepository
from mobile_app_ws.app.services.user_service import UserService


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_call(item: pytest.Item) -> None:
    """Give ``bare_root`` tests a root logger without pytest's capture handlers.

    pytest's logging plugin attaches its handlers to the root logger after
    fixture setup, so ``bare_root`` cannot empty the list on its own.
    """
    if "bare_root" in getattr(item, "fixturenames", ()):
        logging.getLogger().handlers.clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(database_url=str(tmp_path / "users.db"), log_level="WARNING")


@pytest.fixture
def user_service() -> UserService:
    return UserService()


@pytest.fixture
def user_repository(settings: Settings) -> UserRepository:
    return UserRepository(settings.database_url)


@pytest.fixture
def app(settings: Settings, user_service: UserService, user_repository: UserRepository) -> FastAPI:
    return create_app(settings, user_service=user_service, user_repository=user_repository)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a FastAPI test client with the lifespan (schema setup) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_details() -> Dict[str, Any]:
    return {
        "firstName": "Jan",
        "lastName": "Doe",
        "email": "jan@example.com",
        "password": "secret123",
    }
