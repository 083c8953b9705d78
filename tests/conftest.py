"""
Pytest fixtures for API tests
"""

import pytest
from fastapi.testclient import TestClient
from typing import Dict, Any

from profile_api.config.settings import Settings
from profile_api.database.supabase_client import get_supabase
from profile_api.main import create_app

from fakes import TEST_PASSWORD, FakeSupabaseBackend, FakeSupabaseClient


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        supabase_url="http://supabase.test",
        supabase_anon_key="test-anon-key",
        rate_limit_enabled=False,
    )


@pytest.fixture
def backend() -> FakeSupabaseBackend:
    """A fresh Supabase project per test"""
    return FakeSupabaseBackend()


@pytest.fixture
def app(test_settings, backend):
    application = create_app(test_settings)
    application.dependency_overrides[get_supabase] = lambda: FakeSupabaseClient(backend)
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def signed_up(client) -> Dict[str, Any]:
    """Sign up a@b.com and return the signup response body"""
    response = client.post("/api/auth/signup", json={"email": "a@b.com", "password": TEST_PASSWORD})
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def auth_headers(signed_up) -> Dict[str, str]:
    return {"Authorization": f"Bearer {signed_up['session']['access_token']}"}
