# vaultkeep/app/db/init_db.py
"""Create the database tables: ``python -m vaultkeep.app.db.init_db``."""
import asyncio
import logging
import sys

from vaultkeep.app.core.config import settings
from vaultkeep.app.core.logging import configure_logging
from vaultkeep.app.db.session import Database

logger = logging.getLogger(__name__)


async def init_models(database: Database) -> None:
    try:
        logger.info("Creating tables...")
        await database.create_all()
        logger.info("Tables created")
    except Exception as e:
        logger.error("Table creation failed: %s", e)
        raise
    finally:
        await database.close()


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    asyncio.run(init_models(Database.from_settings(settings)))
