"""
Tests for the profile routes and ProfileService
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from profile_api.core.errors import CollaboratorError
from profile_api.modules.profiles.schemas import ProfileUpdateRequest
from profile_api.modules.profiles.service import ProfileService


def parse(value: str) -> datetime:
    return datetime.fromisoformat(value)


def test_fresh_profile_is_empty(client, signed_up, auth_headers):
    response = client.get("/api/profile", headers=auth_headers)
    assert response.status_code == 200

    profile = response.json()["profile"]
    assert profile["id"] == signed_up["user"]["id"]
    assert profile["name"] is None
    assert profile["bio"] is None
    assert profile["created_at"] == profile["updated_at"]


def test_update_name_then_read(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"name": "Alice"})
    assert response.status_code == 200
    assert response.json()["message"] == "Profile updated successfully"
    assert response.json()["profile"]["name"] == "Alice"

    profile = client.get("/api/profile", headers=auth_headers).json()["profile"]
    assert profile["name"] == "Alice"
    assert profile["bio"] is None
    assert parse(profile["updated_at"]) > parse(profile["created_at"])


def test_omitted_fields_are_unchanged(client, auth_headers):
    client.put("/api/profile", headers=auth_headers, json={"bio": "Likes tea"})
    client.put("/api/profile", headers=auth_headers, json={"name": "Alice"})

    profile = client.get("/api/profile", headers=auth_headers).json()["profile"]
    assert profile["name"] == "Alice"
    assert profile["bio"] == "Likes tea"


def test_update_both_fields(client, auth_headers):
    response = client.put(
        "/api/profile", headers=auth_headers, json={"name": "Alice", "bio": "Hello"}
    )
    profile = response.json()["profile"]
    assert (profile["name"], profile["bio"]) == ("Alice", "Hello")


def test_empty_update_returns_current_profile(client, auth_headers):
    client.put("/api/profile", headers=auth_headers, json={"name": "Alice"})
    before = client.get("/api/profile", headers=auth_headers).json()["profile"]

    response = client.put("/api/profile", headers=auth_headers, json={})
    assert response.status_code == 200
    assert response.json()["profile"] == before


def test_update_ignores_id_in_body(client, backend, auth_headers):
    other = client.post("/api/auth/signup", json={"email": "b@b.com", "password": "abcdef"}).json()
    other_id = other["user"]["id"]

    client.put("/api/profile", headers=auth_headers, json={"id": other_id, "name": "Mallory"})

    assert backend.profiles[other_id]["name"] is None


def test_users_only_see_their_own_profile(client, signed_up, auth_headers):
    other = client.post("/api/auth/signup", json={"email": "b@b.com", "password": "abcdef"}).json()
    other_headers = {"Authorization": f"Bearer {other['session']['access_token']}"}

    client.put("/api/profile", headers=auth_headers, json={"name": "Alice"})

    mine = client.get("/api/profile", headers=auth_headers).json()["profile"]
    theirs = client.get("/api/profile", headers=other_headers).json()["profile"]
    assert mine["id"] == signed_up["user"]["id"]
    assert theirs["id"] == other["user"]["id"]
    assert theirs["name"] is None


def test_missing_profile_row_is_400(client, backend, signed_up, auth_headers):
    del backend.profiles[signed_up["user"]["id"]]

    response = client.get("/api/profile", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "JSON object requested, multiple (or no) rows returned"}

    response = client.put("/api/profile", headers=auth_headers, json={"name": "Alice"})
    assert response.status_code == 400
    assert response.json() == {"error": "Profile not found"}


def test_update_wrong_type_is_400(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"name": ["Alice"]})
    assert response.status_code == 400
    assert "name" in response.json()["error"]


def test_update_null_name_is_400_and_keeps_value(client, backend, signed_up, auth_headers):
    client.put("/api/profile", headers=auth_headers, json={"name": "Alice"})

    response = client.put("/api/profile", headers=auth_headers, json={"name": None})
    assert response.status_code == 400
    assert "name" in response.json()["error"]

    assert backend.profiles[signed_up["user"]["id"]]["name"] == "Alice"


def test_update_null_bio_is_400(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"bio": None})
    assert response.status_code == 400
    assert "bio" in response.json()["error"]


class TestProfileService:
    """Unit tests with a mocked Supabase client"""

    @pytest.fixture
    def supabase(self):
        return MagicMock()

    def test_get_profile_filters_on_caller_id(self, supabase):
        row = {"id": "u1", "name": None, "bio": None,
               "created_at": "2025-02-11T00:00:00+00:00", "updated_at": "2025-02-11T00:00:00+00:00"}
        supabase.table.return_value.select.return_value.eq.return_value.single.return_value.execute.return_value = MagicMock(data=row)

        profile = ProfileService(supabase).get_profile("u1")

        assert profile.id == "u1"
        supabase.table.assert_called_with("profiles")
        supabase.table.return_value.select.return_value.eq.assert_called_with("id", "u1")

    def test_update_sends_only_present_fields(self, supabase):
        row = {"id": "u1", "name": "Alice", "bio": "old",
               "created_at": "2025-02-11T00:00:00+00:00", "updated_at": "2025-02-11T00:00:05+00:00"}
        supabase.table.return_value.update.return_value.eq.return_value.execute.return_value = MagicMock(data=[row])

        ProfileService(supabase).update_profile("u1", ProfileUpdateRequest(name="Alice"))

        supabase.table.return_value.update.assert_called_with({"name": "Alice"})
        supabase.table.return_value.update.return_value.eq.assert_called_with("id", "u1")

    def test_explicit_null_is_rejected_by_schema(self, supabase):
        with pytest.raises(PydanticValidationError):
            ProfileUpdateRequest(bio=None)

        supabase.table.assert_not_called()

    def test_provider_error_message_is_passed_through(self, supabase):
        error = Exception("boom")
        error.message = "permission denied for table profiles"
        supabase.table.return_value.select.return_value.eq.return_value.single.return_value.execute.side_effect = error

        with pytest.raises(CollaboratorError) as exc_info:
            ProfileService(supabase).get_profile("u1")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "permission denied for table profiles"
