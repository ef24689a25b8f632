# vaultkeep/app/services/vault_store.py
"""
Owner-scoped persistence of vault items.

Every statement issued here filters on ``user_id``; a record owned by
someone else is indistinguishable from a missing one (``NotFound``).

``encrypted_data`` and ``iv`` are opaque: they are validated for
presence, stored, and returned untouched. Search only looks at
``title`` and ``tags``.
"""
import logging
from typing import Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from vaultkeep.app.core.clock import next_timestamp, utcnow
from vaultkeep.app.core.errors import NotFound, ValidationError
from vaultkeep.app.models.vault_item import VaultItem
from vaultkeep.app.services.storage import storage_errors

logger = logging.getLogger(__name__)

# vault_items.id is an Integer column: 32-bit signed on PostgreSQL
MAX_ITEM_ID = 2 ** 31 - 1


def is_valid_item_id(item_id) -> bool:
    return (
        isinstance(item_id, int)
        and not isinstance(item_id, bool)
        and 1 <= item_id <= MAX_ITEM_ID
    )


def _require_utf8(name: str, value: str) -> None:
    # Lone surrogates survive JSON decoding but cannot be stored
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError(f"{name} must be valid UTF-8 text") from None


def validate_item_fields(
    title: str,
    encrypted_data: str,
    iv: str,
    tags: Optional[Iterable[str]],
) -> List[str]:
    """
    Check the fields shared by create and update.

    Returns the tags as a list; ``None`` becomes ``[]``.
    """
    for name, value in (("title", title), ("encrypted_data", encrypted_data), ("iv", iv)):
        if not isinstance(value, str) or value == "":
            raise ValidationError(f"{name} is required")
        _require_utf8(name, value)

    if tags is None:
        return []
    if isinstance(tags, str):
        raise ValidationError("tags must be a list of strings")
    tags = list(tags)
    if not all(isinstance(tag, str) for tag in tags):
        raise ValidationError("tags must be a list of strings")
    for tag in tags:
        _require_utf8("tags", tag)
    return tags


def matches_query(item: VaultItem, query: str) -> bool:
    """Case-insensitive literal substring match on title or any tag."""
    needle = query.lower()
    if needle in item.title.lower():
        return True
    return any(needle in tag.lower() for tag in item.tags or [])


class VaultStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _owned_by(self, owner_id: int):
        return (
            select(VaultItem)
            .where(VaultItem.user_id == owner_id)
            .order_by(VaultItem.created_at.desc(), VaultItem.id.desc())
        )

    async def list(self, owner_id: int) -> List[VaultItem]:
        """All items of ``owner_id``, newest first."""
        async with storage_errors(self.db, "list"):
            result = await self.db.execute(self._owned_by(owner_id))
            return list(result.scalars().all())

    async def create(
        self,
        owner_id: int,
        title: str,
        encrypted_data: str,
        iv: str,
        tags: Optional[Iterable[str]] = None,
    ) -> VaultItem:
        tags = validate_item_fields(title, encrypted_data, iv, tags)
        now = utcnow()
        item = VaultItem(
            user_id=owner_id,
            title=title,
            encrypted_data=encrypted_data,
            iv=iv,
            tags=tags,
            created_at=now,
            updated_at=now,
        )
        async with storage_errors(self.db, "create"):
            self.db.add(item)
            await self.db.commit()

        logger.info("Vault item %s created for user %s", item.id, owner_id)
        return item

    async def update(
        self,
        owner_id: int,
        item_id: int,
        title: str,
        encrypted_data: str,
        iv: str,
        tags: Optional[Iterable[str]] = None,
    ) -> VaultItem:
        """
        Replace title, encrypted_data, iv and tags as one unit.

        Missing ``tags`` clears the item's tags; there is no partial
        update.
        """
        tags = validate_item_fields(title, encrypted_data, iv, tags)
        if not is_valid_item_id(item_id):
            raise NotFound()

        async with storage_errors(self.db, "update"):
            query = (
                select(VaultItem)
                .where(VaultItem.id == item_id, VaultItem.user_id == owner_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(query)
            item = result.scalars().first()

            if item is None:
                raise NotFound()

            item.title = title
            item.encrypted_data = encrypted_data
            item.iv = iv
            item.tags = tags
            item.updated_at = next_timestamp(item.updated_at)

            try:
                await self.db.commit()
            except StaleDataError as exc:
                # Row deleted between the lookup and the write
                await self.db.rollback()
                raise NotFound() from exc

        logger.info("Vault item %s updated for user %s", item_id, owner_id)
        return item

    async def delete(self, owner_id: int, item_id: int) -> None:
        if not is_valid_item_id(item_id):
            raise NotFound()
        async with storage_errors(self.db, "delete"):
            result = await self.db.execute(
                delete(VaultItem).where(
                    VaultItem.id == item_id, VaultItem.user_id == owner_id
                )
            )
            if result.rowcount == 0:
                raise NotFound()
            await self.db.commit()

        logger.info("Vault item %s deleted for user %s", item_id, owner_id)

    async def search(self, owner_id: int, query: Optional[str]) -> List[VaultItem]:
        """
        Items whose title or one of whose tags contains ``query``.

        A missing or blank query returns the same result as ``list``.
        """
        items = await self.list(owner_id)
        if query is None or not query.strip():
            return items
        return [item for item in items if matches_query(item, query)]
