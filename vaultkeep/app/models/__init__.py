from vaultkeep.app.models.user import User
from vaultkeep.app.models.vault_item import VaultItem

__all__ = ["User", "VaultItem"]
