import uuid

import pytest

from app.exceptions import (
    AlreadyFriends,
    FriendNotFound,
    FriendRequestAlreadyExists,
    FriendRequestNotFound,
    InvalidFriendRequest,
)
from app.friending import service as svc
from app.friending.constants import FriendRequestStatus
from app.friending.models import FriendRequest, ordered_pair


def _ids() -> tuple[uuid.UUID, uuid.UUID]:
    return uuid.uuid4(), uuid.uuid4()


async def _return_none(*args, **kwargs):
    return None


def test_ordered_pair_is_direction_free() -> None:
    a, b = _ids()
    assert ordered_pair(a, b) == ordered_pair(b, a)


@pytest.mark.asyncio
async def test_send_request_creates_pending_request(db_session) -> None:
    a, b = _ids()
    request = await svc.send_request(db_session, a, b)
    assert request.status == FriendRequestStatus.PENDING
    for user in (a, b):
        requests = await svc.get_requests(db_session, user)
        assert [(r.requester_id, r.recipient_id) for r in requests] == [(a, b)]


@pytest.mark.asyncio
async def test_send_request_to_self_is_invalid(db_session) -> None:
    a, _ = _ids()
    with pytest.raises(InvalidFriendRequest):
        await svc.send_request(db_session, a, a)


@pytest.mark.asyncio
async def test_duplicate_request_in_either_direction(db_session) -> None:
    a, b = _ids()
    await svc.send_request(db_session, a, b)
    with pytest.raises(FriendRequestAlreadyExists):
        await svc.send_request(db_session, a, b)
    with pytest.raises(FriendRequestAlreadyExists):
        await svc.send_request(db_session, b, a)


@pytest.mark.asyncio
async def test_accept_creates_symmetric_friendship(db_session) -> None:
    a, b = _ids()
    await svc.send_request(db_session, a, b)
    edge = await svc.accept_request(db_session, a, b)
    assert edge.other(a) == b
    assert await svc.get_friends(db_session, a) == [b]
    assert await svc.get_friends(db_session, b) == [a]
    assert await svc.get_requests(db_session, a) == []
    assert await svc.get_requests(db_session, b) == []


@pytest.mark.asyncio
async def test_sender_cannot_accept_own_request(db_session) -> None:
    a, b = _ids()
    await svc.send_request(db_session, a, b)
    with pytest.raises(FriendRequestNotFound):
        await svc.accept_request(db_session, b, a)


@pytest.mark.asyncio
async def test_request_between_friends_is_rejected(db_session) -> None:
    a, b = _ids()
    await svc.send_request(db_session, a, b)
    await svc.accept_request(db_session, a, b)
    with pytest.raises(AlreadyFriends):
        await svc.send_request(db_session, a, b)
    with pytest.raises(AlreadyFriends):
        await svc.send_request(db_session, b, a)


@pytest.mark.asyncio
async def test_reject_removes_request_without_friendship(db_session) -> None:
    a, b = _ids()
    await svc.send_request(db_session, a, b)
    rejected = await svc.reject_request(db_session, a, b)
    assert rejected.status == FriendRequestStatus.REJECTED
    assert await svc.get_friends(db_session, a) == []
    assert await svc.get_requests(db_session, b) == []
    # The pair is free again
    await svc.send_request(db_session, b, a)


@pytest.mark.asyncio
async def test_reject_without_request(db_session) -> None:
    a, b = _ids()
    with pytest.raises(FriendRequestNotFound):
        await svc.reject_request(db_session, a, b)


@pytest.mark.asyncio
async def test_remove_request(db_session) -> None:
    a, b = _ids()
    await svc.send_request(db_session, a, b)
    # Only the sender's direction can be withdrawn
    with pytest.raises(FriendRequestNotFound):
        await svc.remove_request(db_session, b, a)
    await svc.remove_request(db_session, a, b)
    assert await svc.get_requests(db_session, a) == []
    with pytest.raises(FriendRequestNotFound):
        await svc.remove_request(db_session, a, b)


@pytest.mark.asyncio
async def test_remove_friend(db_session) -> None:
    a, b = _ids()
    await svc.send_request(db_session, a, b)
    await svc.accept_request(db_session, a, b)
    await svc.remove_friend(db_session, b, a)
    assert await svc.get_friends(db_session, a) == []
    assert not await svc.are_friends(db_session, a, b)
    with pytest.raises(FriendNotFound):
        await svc.remove_friend(db_session, a, b)
    # Unfriended users may start over
    await svc.send_request(db_session, a, b)


@pytest.mark.asyncio
async def test_friends_are_per_user(db_session) -> None:
    a, b = _ids()
    c = uuid.uuid4()
    for other in (b, c):
        await svc.send_request(db_session, a, other)
        await svc.accept_request(db_session, a, other)
    assert set(await svc.get_friends(db_session, a)) == {b, c}
    assert await svc.get_friends(db_session, c) == [a]


@pytest.mark.asyncio
async def test_crossing_requests_hit_the_pair_constraint(session_factory, monkeypatch) -> None:
    a, b = _ids()
    async with session_factory() as first:
        await svc.send_request(first, a, b)
        await first.commit()

    # The second writer's pre-check misses the committed row
    monkeypatch.setattr(svc, "_pending_request_between", _return_none)
    async with session_factory() as second:
        with pytest.raises(FriendRequestAlreadyExists):
            await svc.send_request(second, b, a)

    async with session_factory() as check:
        requests = await svc.get_requests(check, a)
        assert [(r.requester_id, r.recipient_id) for r in requests] == [(a, b)]


@pytest.mark.asyncio
async def test_second_accept_of_same_request_fails(session_factory, monkeypatch) -> None:
    a, b = _ids()
    async with session_factory() as first:
        await svc.send_request(first, a, b)
        stale = await svc._pending_request_from(first, a, b)
        await svc.accept_request(first, a, b)
        await first.commit()

    # A concurrent accept that read the request before it was deleted
    async def _stale(*args, **kwargs) -> FriendRequest:
        return stale

    monkeypatch.setattr(svc, "_pending_request_from", _stale)
    async with session_factory() as second:
        with pytest.raises(FriendRequestNotFound):
            await svc.accept_request(second, a, b)

    async with session_factory() as check:
        assert await svc.get_friends(check, a) == [b]
