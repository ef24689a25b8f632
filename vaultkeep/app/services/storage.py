# vaultkeep/app/services/storage.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vaultkeep.app.core.errors import StorageUnavailable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_errors(db: AsyncSession, operation: str) -> AsyncIterator[None]:
    """
    Report database failures as ``StorageUnavailable``.

    The session is rolled back so it stays usable. Nothing is retried
    here; retrying is up to the caller.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Storage failure during %s: %s", operation, type(exc).__name__)
        await db.rollback()
        raise StorageUnavailable() from exc
