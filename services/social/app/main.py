import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.database import init_db
from app.rate_limit import limiter
from app.auth.router import router as auth_router
from app.friending.router import router as friending_router
from app.joining.router import router as joining_router
from app.posting.router import router as posting_router
from app.verification.router import router as verification_router
from shared.middleware.request_id import request_id_middleware
from shared.middleware.error_handler import error_envelope_middleware, http_exception_handler

logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s: %(message)s")


# ── OpenAPI metadata ──────────────────────────────────────────────────────────

_DESCRIPTION = """
## Huddle Social Service

A small social backend assembled from independent concepts:

* **Accounts & sessions** - sign up, log in (bearer token backed by a server-side
  session), rename, change password, delete account.
* **Friending** - request / accept / reject / withdraw friend requests; unfriend.
  At most one pending request and one friendship per pair of users.
* **Posting** - posts by verified users; every post is also an event people can join.
* **Joining** - join and leave events; each user joins an event at most once.
* **Identity verification** - submit a government ID; admins approve or reject.

### Authentication
Protected endpoints require:
```
Authorization: Bearer <access_token>
```

### Error shape
All errors return a consistent JSON envelope:
```json
{ "detail": "Human-readable message", "request_id": "..." }
```
Validation errors (`422`) return the standard Pydantic error list under `detail`.

### Rate limits
Sending friend requests is rate limited; `429 Too Many Requests` is returned when
the limit is exceeded.
"""

_TAGS_METADATA = [
    {"name": "auth", "description": "Accounts, login/logout and the current session."},
    {
        "name": "friending",
        "description": (
            "Friend requests and friendships. Usernames in paths are resolved to "
            "accounts; responses show usernames."
        ),
    },
    {"name": "posting", "description": "Create, edit and delete posts. Creating requires a verified identity."},
    {"name": "joining", "description": "Join and leave events (posts) and list participants."},
    {
        "name": "verification",
        "description": "Identity verification. Approve / reject endpoints are **admin only**.",
    },
]


# ── Health schema ─────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str
    service: str


# ── App factory ───────────────────────────────────────────────────────────────

def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    init_db(settings.social_database_url)
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Huddle Social Service",
        version="1.0.0",
        description=_DESCRIPTION,
        openapi_tags=_TAGS_METADATA,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Attach rate limiter state before middleware
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Middleware is applied in reverse-registration order (last added = outermost).
    # CORS must be outermost so ALL responses (including 429s) carry CORS headers.
    app.add_middleware(SlowAPIMiddleware)
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(error_envelope_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(friending_router, prefix="/api/v1")
    app.include_router(posting_router, prefix="/api/v1")
    app.include_router(joining_router, prefix="/api/v1")
    app.include_router(verification_router, prefix="/api/v1")

    @app.get("/health", response_model=HealthResponse, tags=["health"], include_in_schema=True)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="social")

    return app


app = create_app()
