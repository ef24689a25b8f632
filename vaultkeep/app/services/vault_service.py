# vaultkeep/app/services/vault_service.py
"""
Vault façade used by the API layer.

Binds the resolved caller to every store call, so nothing can reach the
store without an owner scope. A missing caller fails with
``Unauthorized`` before any storage access.
"""
from typing import Iterable, List, Optional

from vaultkeep.app.core.errors import Unauthorized
from vaultkeep.app.models.vault_item import VaultItem
from vaultkeep.app.schemas.user import CallerIdentity
from vaultkeep.app.services.master_key import MasterKeyGate
from vaultkeep.app.services.vault_store import VaultStore


class VaultService:
    def __init__(
        self,
        store: VaultStore,
        gate: MasterKeyGate,
        caller: Optional[CallerIdentity] = None,
    ):
        self.store = store
        self.gate = gate
        self.caller = caller

    @property
    def owner_id(self) -> int:
        if self.caller is None:
            raise Unauthorized()
        return self.caller.account_id

    async def list(self) -> List[VaultItem]:
        return await self.store.list(self.owner_id)

    async def create(
        self,
        title: str,
        encrypted_data: str,
        iv: str,
        tags: Optional[Iterable[str]] = None,
    ) -> VaultItem:
        return await self.store.create(self.owner_id, title, encrypted_data, iv, tags)

    async def update(
        self,
        item_id: int,
        title: str,
        encrypted_data: str,
        iv: str,
        tags: Optional[Iterable[str]] = None,
    ) -> VaultItem:
        return await self.store.update(
            self.owner_id, item_id, title, encrypted_data, iv, tags
        )

    async def delete(self, item_id: int) -> None:
        await self.store.delete(self.owner_id, item_id)

    async def search(self, query: Optional[str] = None) -> List[VaultItem]:
        return await self.store.search(self.owner_id, query)

    async def verify_master_key(self, presented_key: str) -> bool:
        return await self.gate.verify(self.owner_id, presented_key)
