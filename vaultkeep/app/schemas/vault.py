# vaultkeep/app/schemas/vault.py
from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import List, Optional

from vaultkeep.app.core.clock import as_utc


class VaultItemCreate(BaseModel):
    title: str
    encrypted_data: str
    iv: str
    tags: Optional[List[str]] = None


class VaultItemUpdate(VaultItemCreate):
    """
    Full replacement of an item.

    All fields are sent every time. Omitting ``tags`` clears them.
    """


class VaultItemResponse(BaseModel):
    id: int
    user_id: int
    title: str
    encrypted_data: str
    iv: str
    tags: List[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v):
        return v or []

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class VaultItemListResponse(BaseModel):
    success: bool = True
    items: List[VaultItemResponse]


class VaultItemEnvelope(BaseModel):
    success: bool = True
    message: str
    item: VaultItemResponse


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class MasterKeyVerifyRequest(BaseModel):
    # Optional so an absent key is reported like an empty one
    master_key: Optional[str] = None


class MasterKeyVerifyResponse(BaseModel):
    success: bool = True
    verified: bool
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
