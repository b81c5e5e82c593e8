"""Shared fixtures for the backend test suite."""

import asyncio
import os

# Settings are read at import time, so the environment is prepared first.
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SEED_DEMO_DATA"] = "true"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from codeshelf.application.use_cases.auth_use_cases import AuthUseCases
from codeshelf.application.use_cases.snippet_use_cases import SnippetUseCases
from codeshelf.application.use_cases.tag_use_cases import TagUseCases
from codeshelf.infrastructure.persistence.memory_repositories import (
    InMemorySnippetRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from codeshelf.infrastructure.persistence.seed_data import seed_demo_data
from codeshelf.infrastructure.security.tokens import TokenService
from codeshelf.presentation.api.app import create_app
from codeshelf.shared.di import container


@pytest.fixture
def users():
    return InMemoryUserRepository()


@pytest.fixture
def snippets():
    return InMemorySnippetRepository()


@pytest.fixture
def tags():
    return InMemoryTagRepository()


@pytest.fixture
def seeded(users, snippets, tags):
    asyncio.run(seed_demo_data(users, snippets, tags))
    return users, snippets, tags


@pytest.fixture
def token_service():
    return TokenService(secret="test-secret")


@pytest.fixture
def auth(users, token_service):
    return AuthUseCases(users, token_service)


@pytest.fixture
def snippet_cases(snippets, users):
    return SnippetUseCases(snippets, users)


@pytest.fixture
def tag_cases(tags):
    return TagUseCases(tags)


@pytest.fixture
def client():
    """API client over a fresh, seeded in-memory store."""
    container.clear_cache()
    with TestClient(create_app()) as test_client:
        yield test_client
    container.clear_cache()


def login(client, email="demo@example.com", password="demo123"):
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def demo_headers(client):
    return login(client)


@pytest.fixture
def john_headers(client):
    return login(client, "john@example.com", "password123")
