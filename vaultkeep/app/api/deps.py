# vaultkeep/app/api/deps.py
import logging
import re
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from vaultkeep.app.core.config import Settings, settings
from vaultkeep.app.core.errors import NotFound, Unauthorized
from vaultkeep.app.db.session import get_db
from vaultkeep.app.schemas.user import CallerIdentity, TokenPayload
from vaultkeep.app.security.jwt import decode_access_token
from vaultkeep.app.services.accounts import AccountStore
from vaultkeep.app.services.master_key import MasterKeyGate
from vaultkeep.app.services.vault_service import VaultService
from vaultkeep.app.services.vault_store import VaultStore, is_valid_item_id

logger = logging.getLogger(__name__)

# Tokens are issued by the authentication service.
# auto_error=False: a missing token must surface as our Unauthorized.
reusable_oauth2 = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login",
    auto_error=False,
)

_ITEM_ID = re.compile(r"[0-9]+")


def get_app_settings(request: Request) -> Settings:
    """The ``Settings`` the running app was built with."""
    return request.app.state.settings


async def get_caller(
        token: Optional[str] = Depends(reusable_oauth2),
        app_settings: Settings = Depends(get_app_settings),
) -> Optional[CallerIdentity]:
    """Resolve the bearer token to a caller, or None if there is none."""
    if not token:
        return None

    try:
        payload = decode_access_token(
            token,
            secret_key=app_settings.SECRET_KEY,
            algorithm=app_settings.ALGORITHM,
        )
        token_data = TokenPayload(**payload)
        account_id = int(token_data.sub)
    except (JWTError, ValidationError, TypeError, ValueError):
        logger.info("Rejected bearer token")
        return None

    return CallerIdentity(account_id=account_id)


async def require_caller(
        caller: Optional[CallerIdentity] = Depends(get_caller),
) -> CallerIdentity:
    """
    Router-level guard: reject anonymous requests before any path or
    body parsing, so they always get 401.
    """
    if caller is None:
        raise Unauthorized()
    return caller


def get_item_id(item_id: str) -> int:
    """
    Parse the ``{item_id}`` path segment.

    Anything that cannot name a stored item (not a plain decimal number,
    zero, or past the id column's range) is reported as ``NotFound``.
    """
    if not _ITEM_ID.fullmatch(item_id):
        raise NotFound()
    parsed = int(item_id)
    if not is_valid_item_id(parsed):
        raise NotFound()
    return parsed


async def get_vault_service(
        db: AsyncSession = Depends(get_db),
        caller: Optional[CallerIdentity] = Depends(get_caller),
) -> VaultService:
    return VaultService(
        store=VaultStore(db),
        gate=MasterKeyGate(AccountStore(db)),
        caller=caller,
    )
