# vaultkeep/app/security/hashing.py
"""
One-way hashing for account secrets.

Both the login password and the master key are stored as bcrypt hashes.
Inputs are first reduced with SHA-256 so that secrets longer than
bcrypt's 72-byte input limit are not silently truncated.

Verification goes through passlib, which compares digests in constant
time.
"""
import hashlib

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _prehash(secret: str) -> str:
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_prehash(password))


def hash_master_key(master_key: str) -> str:
    """
    Build the verifier stored on the account for a master key.

    The master key is never stored; only this salted one-way hash is.
    """
    return pwd_context.hash(_prehash(master_key))


def verify_master_key(presented_key: str, verifier: str) -> bool:
    """
    Check a presented master key against a stored verifier.

    Raises:
        ValueError: if ``verifier`` is not a recognised hash
    """
    return pwd_context.verify(_prehash(presented_key), verifier)
