#!/usr/bin/env python3
"""
Create an admin account (admins approve/reject identity verifications).

Reads credentials from .env:
    ADMIN_USERNAME   - admin username (required)
    ADMIN_PASSWORD   - admin password (required)
    SOCIAL_DATABASE_URL

Usage:
    python -m scripts.create_admin
"""
from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

# Add backend root to path so imports resolve
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "services" / "social"))
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "shared"))

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from app.auth import service as accounts
from app.exceptions import UserNotFound
from shared.constants import Role
from shared.database.postgres import get_async_session_factory


async def main() -> None:
    username = os.getenv("ADMIN_USERNAME")
    password = os.getenv("ADMIN_PASSWORD")
    if not username or not password:
        print("Error: ADMIN_USERNAME and ADMIN_PASSWORD must be set in .env")
        sys.exit(1)
    db_url = os.environ["SOCIAL_DATABASE_URL"]

    session_factory = get_async_session_factory(db_url)

    async with session_factory() as session:
        try:
            existing = await accounts.get_user_by_username(session, username)
        except UserNotFound:
            existing = None

        if existing is not None:
            print(f"User {username} already exists (id={existing.id}).")
            if Role.ADMIN.value not in existing.roles:
                existing.roles = list(set(existing.roles) | {Role.ADMIN.value})
                await session.commit()
                print("  -> Upgraded to admin.")
            else:
                print("  -> Already an admin. Nothing to do.")
        else:
            user = await accounts.register_user(
                session, username, password, roles=[Role.USER, Role.ADMIN]
            )
            await session.commit()
            print(f"Admin created: {username} (id={user.id})")

    await session_factory.kw["bind"].dispose()


if __name__ == "__main__":
    asyncio.run(main())
