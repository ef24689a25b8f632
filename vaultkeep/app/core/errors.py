# vaultkeep/app/core/errors.py
"""
Failure taxonomy of the vault subsystem.

Every error raised by the service layer carries a ``kind`` (stable,
machine readable) and a human readable ``message``. The API layer turns
them into ``{"success": false, "error": kind, "message": message}``.

Ownership mismatches are raised as ``NotFound`` on purpose: a caller
must not be able to tell "exists but belongs to someone else" from
"does not exist".
"""
from typing import Optional

from fastapi import status


class VaultError(Exception):
    kind = "VaultError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Vault operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(VaultError):
    kind = "Unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class ValidationError(VaultError):
    kind = "ValidationError"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class NotFound(VaultError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Item not found"


class InvalidInput(VaultError):
    kind = "InvalidInput"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class StorageUnavailable(VaultError):
    kind = "StorageUnavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Storage is temporarily unavailable"
