# vaultkeep/app/api/v1/endpoints/vault.py
from typing import Optional

from fastapi import APIRouter, Depends, status

from vaultkeep.app.api import deps
from vaultkeep.app.schemas.vault import (
    MasterKeyVerifyRequest,
    MasterKeyVerifyResponse,
    MessageResponse,
    VaultItemCreate,
    VaultItemEnvelope,
    VaultItemListResponse,
    VaultItemUpdate,
)
from vaultkeep.app.services.vault_service import VaultService

# Every route needs a caller; checked before any parameter parsing
router = APIRouter(dependencies=[Depends(deps.require_caller)])


# 1. LIST ITEMS (GET), newest first
@router.get("/items", response_model=VaultItemListResponse)
async def read_vault_items(
        service: VaultService = Depends(deps.get_vault_service),
):
    items = await service.list()
    return {"success": True, "items": items}


# 2. CREATE ITEM (POST)
@router.post("/items", response_model=VaultItemEnvelope, status_code=status.HTTP_201_CREATED)
async def create_vault_item(
        item_in: VaultItemCreate,
        service: VaultService = Depends(deps.get_vault_service),
):
    item = await service.create(**item_in.model_dump())
    return {"success": True, "message": "Item saved successfully", "item": item}


# 3. REPLACE ITEM (PUT)
@router.put("/items/{item_id}", response_model=VaultItemEnvelope)
async def update_vault_item(
        item_in: VaultItemUpdate,
        item_id: int = Depends(deps.get_item_id),
        service: VaultService = Depends(deps.get_vault_service),
):
    item = await service.update(item_id, **item_in.model_dump())
    return {"success": True, "message": "Item updated successfully", "item": item}


# 4. DELETE ITEM (DELETE)
@router.delete("/items/{item_id}", response_model=MessageResponse)
async def delete_vault_item(
        item_id: int = Depends(deps.get_item_id),
        service: VaultService = Depends(deps.get_vault_service),
):
    await service.delete(item_id)
    return {"success": True, "message": "Item deleted successfully"}


# 5. SEARCH BY TITLE / TAG (GET)
@router.get("/search", response_model=VaultItemListResponse)
async def search_vault_items(
        query: Optional[str] = None,
        service: VaultService = Depends(deps.get_vault_service),
):
    items = await service.search(query)
    return {"success": True, "items": items}


# 6. VERIFY MASTER KEY (POST)
@router.post("/verify-master-key", response_model=MasterKeyVerifyResponse)
async def verify_master_key(
        body: MasterKeyVerifyRequest,
        service: VaultService = Depends(deps.get_vault_service),
):
    verified = await service.verify_master_key(body.master_key)
    message = "Master key verified successfully" if verified else "Invalid master key"
    return {"success": True, "verified": verified, "message": message}
