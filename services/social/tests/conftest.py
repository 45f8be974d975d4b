from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.main import app
from app.database import init_db, get_session_factory
from app.rate_limit import limiter
from app.auth import service as accounts
from app.auth.models import AuthSession, User  # noqa: F401 - register with Base
from app.friending.models import FriendRequest, Friendship  # noqa: F401
from app.joining.models import Participation  # noqa: F401
from app.posting.models import Post  # noqa: F401
from app.verification import service as verification
from app.verification.models import IdentityVerification  # noqa: F401
from shared.constants import Role
from shared.database.postgres import Base

API = "/api/v1"


@pytest.fixture
def database_url(tmp_path) -> str:
    # A file database so that separate sessions see each other's commits
    return f"sqlite+aiosqlite:///{tmp_path / 'social_test.db'}"


@pytest_asyncio.fixture
async def session_factory(database_url: str) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(database_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(session_factory, database_url: str) -> AsyncGenerator[AsyncClient, None]:
    # ASGITransport does not run the lifespan, so the app's factory is set up here
    init_db(database_url)
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await get_session_factory().kw["bind"].dispose()


@pytest.fixture
def login(async_client: AsyncClient) -> Callable[..., Awaitable[dict[str, str]]]:
    """Sign up (unless the account exists) and log in; returns auth headers."""

    async def _login(username: str, password: str = "pass1234", *, signup: bool = True) -> dict[str, str]:
        creds = {"username": username, "password": password}
        if signup:
            created = await async_client.post(f"{API}/users", json=creds)
            assert created.status_code == 201, created.text
        resp = await async_client.post(f"{API}/login", json=creds)
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _login


@pytest.fixture
def make_admin(session_factory, login):
    """Create an admin account directly and log it in over HTTP."""

    async def _make_admin(username: str = "admin", password: str = "adminpass") -> dict[str, str]:
        async with session_factory() as session:
            await accounts.register_user(session, username, password, roles=[Role.ADMIN])
            await session.commit()
        return await login(username, password, signup=False)

    return _make_admin


@pytest.fixture
def make_verified(session_factory, login):
    """Sign up a user whose identity is already approved; returns auth headers."""

    async def _make_verified(username: str, password: str = "pass1234") -> dict[str, str]:
        async with session_factory() as session:
            user = await accounts.register_user(session, username, password)
            await verification.submit_verification(session, user.id, "ID-" + username)
            await verification.approve_verification(session, user.id)
            await session.commit()
        return await login(username, password, signup=False)

    return _make_verified
