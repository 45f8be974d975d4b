import pytest
from httpx import AsyncClient

API = "/api/v1"


@pytest.mark.asyncio
async def test_submit_and_approve(async_client: AsyncClient, login, make_admin) -> None:
    alice = await login("alice")
    admin = await make_admin()
    alice_id = (await async_client.get(f"{API}/session", headers=alice)).json()["id"]

    status = await async_client.get(f"{API}/verifications/status", headers=alice)
    assert status.json() == {"status": "unverified"}

    submitted = await async_client.post(f"{API}/verifications", json={"data": "passport-42"}, headers=alice)
    assert submitted.status_code == 201
    duplicate = await async_client.post(f"{API}/verifications", json={"data": "again"}, headers=alice)
    assert duplicate.status_code == 409

    forbidden = await async_client.put(f"{API}/verifications/{alice_id}/approve", headers=alice)
    assert forbidden.status_code == 403

    approved = await async_client.put(f"{API}/verifications/{alice_id}/approve", headers=admin)
    assert approved.status_code == 200
    status = await async_client.get(f"{API}/verifications/status", headers=alice)
    assert status.json() == {"status": "approved"}

    # Verified users can post
    post = await async_client.post(f"{API}/posts", json={"content": "hello"}, headers=alice)
    assert post.status_code == 201


@pytest.mark.asyncio
async def test_reject_then_resubmit(async_client: AsyncClient, login, make_admin) -> None:
    alice = await login("alice")
    admin = await make_admin()
    alice_id = (await async_client.get(f"{API}/session", headers=alice)).json()["id"]

    not_pending = await async_client.put(f"{API}/verifications/{alice_id}/reject", headers=admin)
    assert not_pending.status_code == 404

    await async_client.post(f"{API}/verifications", json={"data": "blurry"}, headers=alice)
    rejected = await async_client.put(f"{API}/verifications/{alice_id}/reject", headers=admin)
    assert rejected.status_code == 200
    status = await async_client.get(f"{API}/verifications/status", headers=alice)
    assert status.json() == {"status": "rejected"}

    resubmitted = await async_client.post(f"{API}/verifications", json={"data": "sharp"}, headers=alice)
    assert resubmitted.status_code == 201
