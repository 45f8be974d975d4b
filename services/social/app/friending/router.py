"""
Friending domain: routes.

Routes:
  GET    /friends                  My friends (usernames)
  DELETE /friends/{friend}         Unfriend
  GET    /friend/requests          Pending requests I sent or received
  POST   /friend/requests/{to}     Send a request  (rate limited)
  DELETE /friend/requests/{to}     Withdraw a request I sent
  PUT    /friend/accept/{from_username}  Accept a request sent to me
  PUT    /friend/reject/{from_username}  Reject a request sent to me
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user
from app.database import get_db
from app.friending import controller as ctrl
from app.friending.schemas import FriendRequestItem
from app.rate_limit import FRIEND_REQUEST_RATE_LIMIT, limiter
from shared.models.user import CurrentUser

router = APIRouter(tags=["friending"])


# ── Friends ────────────────────────────────────────────────────────────────────

@router.get("/friends", response_model=list[str], summary="List my friends")
async def list_friends(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> list[str]:
    return await ctrl.list_friends(session, current_user.id)


@router.delete("/friends/{friend}", summary="Remove a friend")
async def remove_friend(
    friend: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> dict:
    return await ctrl.remove_friend(session, current_user.id, friend)


# ── Requests ───────────────────────────────────────────────────────────────────

@router.get(
    "/friend/requests",
    response_model=list[FriendRequestItem],
    summary="List pending friend requests I sent or received",
)
async def list_requests(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> list[FriendRequestItem]:
    return await ctrl.list_requests(session, current_user.id)


@router.post(
    "/friend/requests/{to}",
    status_code=status.HTTP_201_CREATED,
    summary="Send a friend request",
    description=f"Rate-limited to {FRIEND_REQUEST_RATE_LIMIT} per client.",
)
@limiter.limit(FRIEND_REQUEST_RATE_LIMIT)
async def send_request(
    request: Request,
    to: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> dict:
    return await ctrl.send_request(session, current_user.id, to)


@router.delete("/friend/requests/{to}", summary="Withdraw a friend request I sent")
async def remove_request(
    to: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> dict:
    return await ctrl.remove_request(session, current_user.id, to)


@router.put("/friend/accept/{from_username}", summary="Accept a friend request")
async def accept_request(
    from_username: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> dict:
    return await ctrl.accept_request(session, current_user.id, from_username)


@router.put("/friend/reject/{from_username}", summary="Reject a friend request")
async def reject_request(
    from_username: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> dict:
    return await ctrl.reject_request(session, current_user.id, from_username)
