import pytest
from httpx import AsyncClient

API = "/api/v1"


@pytest.mark.asyncio
async def test_request_accept_unfriend(async_client: AsyncClient, login) -> None:
    alice = await login("alice")
    bob = await login("bob")

    sent = await async_client.post(f"{API}/friend/requests/bob", headers=alice)
    assert sent.status_code == 201
    assert sent.json() == {"message": "Sent request!"}

    requests = (await async_client.get(f"{API}/friend/requests", headers=bob)).json()
    assert len(requests) == 1
    assert requests[0]["from"] == "alice"
    assert requests[0]["to"] == "bob"
    assert requests[0]["status"] == "pending"

    # Only the recipient can accept
    wrong_side = await async_client.put(f"{API}/friend/accept/bob", headers=alice)
    assert wrong_side.status_code == 404

    accepted = await async_client.put(f"{API}/friend/accept/alice", headers=bob)
    assert accepted.status_code == 200
    assert (await async_client.get(f"{API}/friends", headers=alice)).json() == ["bob"]
    assert (await async_client.get(f"{API}/friends", headers=bob)).json() == ["alice"]
    assert (await async_client.get(f"{API}/friend/requests", headers=bob)).json() == []

    again = await async_client.post(f"{API}/friend/requests/alice", headers=bob)
    assert again.status_code == 409

    unfriended = await async_client.delete(f"{API}/friends/bob", headers=alice)
    assert unfriended.json() == {"message": "Unfriended!"}
    missing = await async_client.delete(f"{API}/friends/bob", headers=alice)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_reject_and_withdraw(async_client: AsyncClient, login) -> None:
    alice = await login("alice")
    bob = await login("bob")

    await async_client.post(f"{API}/friend/requests/bob", headers=alice)
    crossing = await async_client.post(f"{API}/friend/requests/alice", headers=bob)
    assert crossing.status_code == 409

    rejected = await async_client.put(f"{API}/friend/reject/alice", headers=bob)
    assert rejected.json() == {"message": "Rejected request!"}
    assert (await async_client.get(f"{API}/friends", headers=bob)).json() == []

    await async_client.post(f"{API}/friend/requests/alice", headers=bob)
    withdrawn = await async_client.delete(f"{API}/friend/requests/alice", headers=bob)
    assert withdrawn.json() == {"message": "Removed request!"}
    assert (await async_client.get(f"{API}/friend/requests", headers=alice)).json() == []


@pytest.mark.asyncio
async def test_invalid_targets(async_client: AsyncClient, login) -> None:
    alice = await login("alice")
    to_self = await async_client.post(f"{API}/friend/requests/alice", headers=alice)
    assert to_self.status_code == 422
    unknown = await async_client.post(f"{API}/friend/requests/nobody", headers=alice)
    assert unknown.status_code == 404
    anonymous = await async_client.get(f"{API}/friends")
    assert anonymous.status_code == 401


@pytest.mark.asyncio
async def test_deleted_sender_is_rendered_as_placeholder(async_client: AsyncClient, login) -> None:
    alice = await login("alice")
    carol = await login("carol")
    await async_client.post(f"{API}/friend/requests/alice", headers=carol)
    await async_client.delete(f"{API}/users", headers=carol)

    requests = (await async_client.get(f"{API}/friend/requests", headers=alice)).json()
    assert requests[0]["from"] == "DELETED_USER"


@pytest.mark.asyncio
async def test_sending_requests_is_rate_limited(async_client: AsyncClient, login) -> None:
    alice = await login("alice")
    statuses = []
    for _ in range(40):
        response = await async_client.post(f"{API}/friend/requests/nobody", headers=alice)
        statuses.append(response.status_code)
        if response.status_code == 429:
            break
    assert statuses[0] == 404
    assert statuses[-1] == 429
