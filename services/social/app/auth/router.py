"""
Accounts/sessions: routes.

Only HTTP concerns live here:
  - Route declarations, HTTP methods, status codes, response_model
  - Dependency injection (session, settings, current user)
  - Forwarding to the controller

Routes:
  GET    /session             The logged-in user
  GET    /users               All users
  GET    /users/{username}    One user by username
  POST   /users               Sign up (must be logged out)
  PATCH  /users/username      Rename the logged-in user
  PATCH  /users/password      Change the logged-in user's password
  DELETE /users               Log out and delete the logged-in user
  POST   /login               Start a session, returns a bearer token
  POST   /logout              End the current session
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import controller as ctrl
from app.auth.dependencies import get_current_user, require_logged_out
from app.auth.schemas import (
    CredentialsRequest,
    MessageResponse,
    TokenResponse,
    UpdatePasswordRequest,
    UpdateUsernameRequest,
    UserCreatedResponse,
    UserResponse,
)
from app.config import Settings
from app.database import get_db
from shared.models.user import CurrentUser

router = APIRouter(tags=["auth"])


def _get_settings() -> Settings:
    return Settings()


@router.get("/session", response_model=UserResponse, summary="Get the logged-in user")
async def get_session_user(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> UserResponse:
    return await ctrl.get_session_user(session, current_user)


@router.get("/users", response_model=list[UserResponse], summary="List users")
async def list_users(session: AsyncSession = Depends(get_db)) -> list[UserResponse]:
    return await ctrl.list_users(session)


@router.get("/users/{username}", response_model=UserResponse, summary="Get a user by username")
async def get_user(
    username: str,
    session: AsyncSession = Depends(get_db),
) -> UserResponse:
    return await ctrl.get_user(session, username)


@router.post(
    "/users",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    dependencies=[Depends(require_logged_out)],
)
async def create_user(
    body: CredentialsRequest,
    session: AsyncSession = Depends(get_db),
) -> UserCreatedResponse:
    return await ctrl.create_user(session, body)


@router.patch("/users/username", response_model=MessageResponse, summary="Change username")
async def update_username(
    body: UpdateUsernameRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.update_username(session, current_user.id, body)


@router.patch("/users/password", response_model=MessageResponse, summary="Change password")
async def update_password(
    body: UpdatePasswordRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.update_password(session, current_user.id, body)


@router.delete("/users", response_model=MessageResponse, summary="Delete the logged-in user")
async def delete_user(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.delete_user(session, current_user)


@router.post("/login", response_model=TokenResponse, summary="Log in")
async def login(
    body: CredentialsRequest,
    session: AsyncSession = Depends(get_db),
    settings: Settings = Depends(_get_settings),
) -> TokenResponse:
    return await ctrl.login(session, body, settings)


@router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.logout(session, current_user)
