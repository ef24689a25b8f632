# vaultkeep/app/services/master_key.py
"""
Master key gate.

Re-authorizes sensitive vault actions (typically revealing decrypted
content in the client) by checking a presented master key against the
account's stored one-way verifier.

Security:
- The verifier is never returned or logged
- Comparison is delegated to passlib (constant time)
- No lockout or rate limiting here; the calling layer owns that
"""
import logging

from starlette.concurrency import run_in_threadpool

from vaultkeep.app.core.errors import InvalidInput, NotFound
from vaultkeep.app.security import hashing
from vaultkeep.app.services.accounts import AccountStore

logger = logging.getLogger(__name__)


class MasterKeyGate:
    def __init__(self, accounts: AccountStore):
        self.accounts = accounts

    async def verify(self, account_id: int, presented_key: str) -> bool:
        """
        Check ``presented_key`` against the account's master key verifier.

        A wrong key returns False; it is not an error.

        Raises:
            InvalidInput: the presented key is empty or not valid UTF-8
            NotFound: no account with ``account_id``
        """
        if not isinstance(presented_key, str) or presented_key == "":
            raise InvalidInput("Master key is required")
        try:
            presented_key.encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidInput("Master key must be valid UTF-8 text") from None

        account = await self.accounts.get(account_id)
        if account is None:
            raise NotFound("User not found")

        if not account.master_key_hash:
            logger.warning("Account %s has no master key set", account_id)
            return False

        try:
            # bcrypt is slow on purpose; keep it off the event loop
            matched = await run_in_threadpool(
                hashing.verify_master_key, presented_key, account.master_key_hash
            )
        except ValueError:
            logger.warning("Account %s has an unrecognised master key verifier", account_id)
            return False

        logger.info(
            "Master key verification for account %s: %s",
            account_id,
            "match" if matched else "mismatch",
        )
        return matched
