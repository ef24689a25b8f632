# vaultkeep/app/security/jwt.py
"""
Bearer tokens carrying the caller's account id in ``sub``.

Tokens are issued by the surrounding authentication service; this module
only needs to decode them. ``create_access_token`` exists for that
service and for tests.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt

from vaultkeep.app.core.config import settings


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(
        to_encode, secret_key or settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )


def decode_access_token(
    token: str,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Decode and verify a token (signature and expiry).

    The key and algorithm default to the process settings; an app built
    with its own ``Settings`` passes them explicitly.

    Raises:
        jose.JWTError: on any invalid token
    """
    return jwt.decode(
        token,
        secret_key or settings.SECRET_KEY,
        algorithms=[algorithm or settings.ALGORITHM],
    )
