from vaultkeep.app.db.base import Base
from vaultkeep.app.db.session import Database, get_db

__all__ = [
    "Base",
    "Database",
    "get_db",
]
