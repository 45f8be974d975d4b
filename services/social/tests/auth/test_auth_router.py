import pytest
from httpx import AsyncClient

API = "/api/v1"


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "social"}


@pytest.mark.asyncio
async def test_sign_up(async_client: AsyncClient) -> None:
    creds = {"username": "alice", "password": "password123"}
    created = await async_client.post(f"{API}/users", json=creds)
    assert created.status_code == 201
    body = created.json()
    assert body["message"] == "Created user successfully!"
    assert body["user"]["username"] == "alice"
    assert "password_hash" not in body["user"]

    dup = await async_client.post(f"{API}/users", json=creds)
    assert dup.status_code == 409
    assert dup.json()["request_id"]

    bad = await async_client.post(f"{API}/users", json={"username": "a b", "password": "x"})
    assert bad.status_code == 422


@pytest.mark.asyncio
async def test_login_and_session(async_client: AsyncClient, login) -> None:
    headers = await login("alice")
    me = await async_client.get(f"{API}/session", headers=headers)
    assert me.status_code == 200
    assert me.json()["username"] == "alice"

    wrong = await async_client.post(f"{API}/login", json={"username": "alice", "password": "nope"})
    assert wrong.status_code == 401

    anonymous = await async_client.get(f"{API}/session")
    assert anonymous.status_code == 401
    assert anonymous.json()["detail"] == "Not authenticated"


@pytest.mark.asyncio
async def test_sign_up_requires_logged_out(async_client: AsyncClient, login) -> None:
    headers = await login("alice")
    response = await async_client.post(
        f"{API}/users", json={"username": "other", "password": "pw"}, headers=headers
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_lookup_users(async_client: AsyncClient, login) -> None:
    await login("alice")
    await login("bob")
    users = await async_client.get(f"{API}/users")
    assert [u["username"] for u in users.json()] == ["alice", "bob"]

    bob = await async_client.get(f"{API}/users/bob")
    assert bob.status_code == 200
    missing = await async_client.get(f"{API}/users/carol")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "User carol does not exist."


@pytest.mark.asyncio
async def test_rename_and_change_password(async_client: AsyncClient, login) -> None:
    headers = await login("alice", "first")
    renamed = await async_client.patch(
        f"{API}/users/username", json={"username": "alicia"}, headers=headers
    )
    assert renamed.status_code == 200
    me = await async_client.get(f"{API}/session", headers=headers)
    assert me.json()["username"] == "alicia"

    bad = await async_client.patch(
        f"{API}/users/password",
        json={"current_password": "wrong", "new_password": "second"},
        headers=headers,
    )
    assert bad.status_code == 401
    ok = await async_client.patch(
        f"{API}/users/password",
        json={"current_password": "first", "new_password": "second"},
        headers=headers,
    )
    assert ok.status_code == 200
    await login("alicia", "second", signup=False)


@pytest.mark.asyncio
async def test_logout_ends_session(async_client: AsyncClient, login) -> None:
    headers = await login("alice")
    out = await async_client.post(f"{API}/logout", headers=headers)
    assert out.json() == {"message": "Logged out!"}
    again = await async_client.get(f"{API}/session", headers=headers)
    assert again.status_code == 401


@pytest.mark.asyncio
async def test_delete_account(async_client: AsyncClient, login) -> None:
    headers = await login("alice")
    deleted = await async_client.delete(f"{API}/users", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "User deleted!"}
    assert (await async_client.get(f"{API}/session", headers=headers)).status_code == 401
    assert (await async_client.get(f"{API}/users/alice")).status_code == 404


@pytest.mark.asyncio
async def test_request_id_is_echoed(async_client: AsyncClient) -> None:
    response = await async_client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_password_whitespace_is_significant(async_client: AsyncClient) -> None:
    created = await async_client.post(
        f"{API}/users", json={"username": "  pw  ", "password": "  secret  "}
    )
    assert created.status_code == 201
    # Usernames are trimmed, passwords are not
    assert created.json()["user"]["username"] == "pw"

    trimmed = await async_client.post(f"{API}/login", json={"username": "pw", "password": "secret"})
    assert trimmed.status_code == 401
    exact = await async_client.post(f"{API}/login", json={"username": "pw", "password": "  secret  "})
    assert exact.status_code == 200
