import uuid

import pytest

from app.exceptions import (
    AlreadyVerified,
    UserNotVerified,
    VerificationAlreadyPending,
    VerificationNotFound,
)
from app.verification import service as svc
from app.verification.constants import UNVERIFIED, VerificationStatus


@pytest.mark.asyncio
async def test_status_lifecycle(db_session) -> None:
    user, admin = uuid.uuid4(), uuid.uuid4()
    assert await svc.get_verification_status(db_session, user) == UNVERIFIED

    await svc.submit_verification(db_session, user, "passport-123")
    assert await svc.get_verification_status(db_session, user) == "pending"
    with pytest.raises(UserNotVerified):
        await svc.assert_user_verified(db_session, user)

    record = await svc.approve_verification(db_session, user, admin)
    assert record.status == VerificationStatus.APPROVED
    assert record.reviewed_by == admin
    assert record.reviewed_at is not None
    await svc.assert_user_verified(db_session, user)


@pytest.mark.asyncio
async def test_resubmission_rules(db_session) -> None:
    user = uuid.uuid4()
    await svc.submit_verification(db_session, user, "id-1")
    with pytest.raises(VerificationAlreadyPending):
        await svc.submit_verification(db_session, user, "id-2")

    await svc.reject_verification(db_session, user)
    assert await svc.get_verification_status(db_session, user) == "rejected"

    record = await svc.submit_verification(db_session, user, "id-3")
    assert record.status == VerificationStatus.PENDING
    assert record.data == "id-3"
    assert record.reviewed_at is None

    await svc.approve_verification(db_session, user)
    with pytest.raises(AlreadyVerified):
        await svc.submit_verification(db_session, user, "id-4")


@pytest.mark.asyncio
async def test_review_requires_pending_record(db_session) -> None:
    user = uuid.uuid4()
    with pytest.raises(VerificationNotFound):
        await svc.approve_verification(db_session, user)
    await svc.submit_verification(db_session, user, "id")
    await svc.approve_verification(db_session, user)
    with pytest.raises(VerificationNotFound):
        await svc.reject_verification(db_session, user)
