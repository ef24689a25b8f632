# vaultkeep/app/services/accounts.py
"""
Read access to accounts, as needed by the vault.

Account management proper (registration, login, master key rotation)
belongs to the authentication service. ``create`` is here for
provisioning scripts and tests.
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from vaultkeep.app.models.user import User
from vaultkeep.app.security import hashing
from vaultkeep.app.services.storage import storage_errors

logger = logging.getLogger(__name__)


class AccountStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, account_id: int) -> Optional[User]:
        async with storage_errors(self.db, "account lookup"):
            return await self.db.get(User, account_id)

    async def create(
        self,
        username: str,
        password: str,
        master_key: Optional[str] = None,
    ) -> User:
        hashed_password = await run_in_threadpool(hashing.get_password_hash, password)
        master_key_hash = None
        if master_key:
            master_key_hash = await run_in_threadpool(hashing.hash_master_key, master_key)

        user = User(
            username=username,
            hashed_password=hashed_password,
            master_key_hash=master_key_hash,
        )
        async with storage_errors(self.db, "account create"):
            self.db.add(user)
            await self.db.commit()

        logger.info("Account %s created", user.id)
        return user
