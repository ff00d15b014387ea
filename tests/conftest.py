"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from teacher_records.application import create_app
from teacher_records.config import Settings
from teacher_records.services.teacher_service import TeacherService
from teacher_records.utils.ids import TimestampIdGenerator
from teacher_records.utils.storage import TeacherStore


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of an isolated storage file for one test."""
    return tmp_path / "teachers.json"


@pytest.fixture
def test_settings(monkeypatch, data_file: Path) -> Settings:
    """Create test settings instance."""
    monkeypatch.setenv("API_TITLE", "Teacher Records Test")
    monkeypatch.setenv("API_VERSION", "0.1.0-test")
    monkeypatch.setenv("DEBUG", "True")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "3000")
    monkeypatch.setenv("DATA_FILE", str(data_file))
    monkeypatch.setenv("STRICT_PERSISTENCE", "False")
    return Settings()


@pytest.fixture
def app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    """Create FastAPI application instance for testing."""
    app = create_app(test_settings)
    yield app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create test client for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client for FastAPI application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def store(data_file: Path) -> TeacherStore:
    """Create a store over the isolated storage file."""
    return TeacherStore(data_file)


@pytest.fixture
def service(store: TeacherStore) -> TeacherService:
    """Create a TeacherService over the isolated store."""
    return TeacherService(store, TimestampIdGenerator())


@pytest.fixture
def teacher_payload() -> dict:
    """A valid candidate teacher record."""
    return {
        "fullName": "Ann Lee",
        "age": 41,
        "dateOfBirth": "1983-04-12",
        "numberOfClasses": 5,
    }
