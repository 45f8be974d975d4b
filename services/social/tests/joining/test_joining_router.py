import uuid

import pytest
from httpx import AsyncClient

API = "/api/v1"


async def _create_event(client: AsyncClient, headers: dict[str, str]) -> str:
    created = await client.post(f"{API}/posts", json={"content": "Board games night"}, headers=headers)
    assert created.status_code == 201
    return created.json()["post"]["id"]


@pytest.mark.asyncio
async def test_join_and_leave_event(async_client: AsyncClient, login, make_verified) -> None:
    host = await make_verified("host")
    alice = await login("alice")
    event_id = await _create_event(async_client, host)

    joined = await async_client.post(f"{API}/events/{event_id}/join", headers=alice)
    assert joined.status_code == 201
    assert joined.json() == {"message": "Successfully joined the event."}

    again = await async_client.post(f"{API}/events/{event_id}/join", headers=alice)
    assert again.status_code == 409

    participants = await async_client.get(f"{API}/events/{event_id}/participants")
    assert participants.json() == ["alice"]
    events = (await async_client.get(f"{API}/users/alice/events")).json()
    assert [e["id"] for e in events] == [event_id]
    assert events[0]["author"] == "host"

    left = await async_client.delete(f"{API}/events/{event_id}/join", headers=alice)
    assert left.status_code == 200
    assert (await async_client.get(f"{API}/events/{event_id}/participants")).json() == []
    not_joined = await async_client.delete(f"{API}/events/{event_id}/join", headers=alice)
    assert not_joined.status_code == 404


@pytest.mark.asyncio
async def test_join_missing_event(async_client: AsyncClient, login) -> None:
    alice = await login("alice")
    response = await async_client.post(f"{API}/events/{uuid.uuid4()}/join", headers=alice)
    assert response.status_code == 404
    assert response.json()["detail"] == "Event not found."


@pytest.mark.asyncio
async def test_joining_requires_login(async_client: AsyncClient) -> None:
    response = await async_client.post(f"{API}/events/{uuid.uuid4()}/join")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_deleted_event_drops_out_of_user_events(
    async_client: AsyncClient, login, make_verified
) -> None:
    host = await make_verified("host")
    alice = await login("alice")
    event_id = await _create_event(async_client, host)
    await async_client.post(f"{API}/events/{event_id}/join", headers=alice)
    await async_client.delete(f"{API}/posts/{event_id}", headers=host)

    assert (await async_client.get(f"{API}/users/alice/events")).json() == []
    unknown_user = await async_client.get(f"{API}/users/nobody/events")
    assert unknown_user.status_code == 404
