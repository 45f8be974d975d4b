"""
Social service: domain-specific HTTP exceptions.

All exceptions use preset status codes and detail messages so that callers
never need to specify these at the call site.  The shared http_exception_handler
renders them in the standard error envelope.

Kinds:
  422  the input is structurally invalid (e.g. befriending yourself)
  409  the operation would break a uniqueness rule
  404  the referenced record does not exist
  401 / 403  authentication and authorization
"""
from fastapi import HTTPException, status


# ── Authentication / sessions ─────────────────────────────────────────────────

class InvalidCredentials(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Username or password is incorrect.",
        )


class SessionExpired(HTTPException):
    """The token is well-formed but its session has been ended (logout, account deleted)."""

    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session not found or has expired. Please log in again.",
            headers={"WWW-Authenticate": "Bearer"},
        )


class AlreadyLoggedIn(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You must be logged out to do this.",
        )


class AdminRequired(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator access required.",
        )


# ── Accounts ──────────────────────────────────────────────────────────────────

class UserNotFound(HTTPException):
    def __init__(self, username: str | None = None) -> None:
        detail = f"User {username} does not exist." if username else "User not found."
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UsernameAlreadyExists(HTTPException):
    def __init__(self, username: str) -> None:
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"User with username {username} already exists.",
        )


class InvalidUsername(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=422,
            detail="Username must be non-empty and may not contain whitespace.",
        )


# ── Friending ─────────────────────────────────────────────────────────────────

class InvalidFriendRequest(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=422,
            detail="You cannot send a friend request to yourself.",
        )


class AlreadyFriends(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail="You are already friends with this user.")


class FriendRequestAlreadyExists(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail="A pending friend request between these users already exists.",
        )


class FriendRequestNotFound(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="Pending friend request not found.")


class FriendNotFound(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="You are not friends with this user.")


# ── Joining ───────────────────────────────────────────────────────────────────

class AlreadyJoined(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail="You have already joined this event.")


class ParticipationNotFound(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="You have not joined this event.")


class EventNotFound(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found.")


# ── Posting ───────────────────────────────────────────────────────────────────

class PostNotFound(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")


class PostAuthorMismatch(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not the author of this post.",
        )


# ── Identity verification ─────────────────────────────────────────────────────

class UserNotVerified(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your identity must be verified before you can do this.",
        )


class AlreadyVerified(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail="Your identity is already verified.")


class VerificationAlreadyPending(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail="A verification is already awaiting review.",
        )


class VerificationNotFound(HTTPException):
    """No PENDING verification exists for the user being reviewed."""

    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No pending verification found for this user.",
        )
