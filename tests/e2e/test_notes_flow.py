"""End-to-end tests for the notes API."""

import pytest

from papertrail.domain.service import OTPDeliveryChannel
from tests.harness import create_api_fixture

api_env = create_api_fixture()


async def auth_headers(client, container, email: str) -> dict[str, str]:
    """Sign up through the OTP flow and return bearer headers."""
    channel = await container.get(OTPDeliveryChannel)
    await client.post(
        "/auth/request-otp",
        json={"email": email, "mode": "signup", "name": "Tester", "dob": "1990-04-01"},
    )
    response = await client.post(
        "/auth/verify-otp", json={"email": email, "otp": channel.last_code_for(email)}
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestNotesFlow:
    @pytest.mark.asyncio
    async def test_create_list_delete(self, api_env):
        client, container = api_env
        headers = await auth_headers(client, container, "alice@example.com")

        response = await client.post(
            "/notes", json={"title": "Groceries", "content": "Milk"}, headers=headers
        )
        assert response.status_code == 201
        note_id = response.json()["note_id"]

        response = await client.get("/notes", headers=headers)
        assert response.status_code == 200
        assert [n["note_id"] for n in response.json()["notes"]] == [note_id]

        response = await client.delete(f"/notes/{note_id}", headers=headers)
        assert response.status_code == 204

        response = await client.get("/notes", headers=headers)
        assert response.json()["notes"] == []

    @pytest.mark.asyncio
    async def test_notes_are_private(self, api_env):
        client, container = api_env
        alice = await auth_headers(client, container, "alice@example.com")
        bob = await auth_headers(client, container, "bob@example.com")
        response = await client.post(
            "/notes", json={"title": "Secret", "content": "Shh"}, headers=alice
        )
        note_id = response.json()["note_id"]

        assert (await client.get("/notes", headers=bob)).json()["notes"] == []
        response = await client.delete(f"/notes/{note_id}", headers=bob)
        assert response.status_code == 404

        response = await client.get("/notes", headers=alice)
        assert len(response.json()["notes"]) == 1

    @pytest.mark.asyncio
    async def test_notes_require_token(self, api_env):
        client, _ = api_env

        assert (await client.get("/notes")).status_code == 401
        response = await client.post("/notes", json={"title": "t", "content": "c"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_empty_title_rejected(self, api_env):
        client, container = api_env
        headers = await auth_headers(client, container, "alice@example.com")

        response = await client.post(
            "/notes", json={"title": "", "content": "c"}, headers=headers
        )

        assert response.status_code == 422
