# vaultkeep/app/models/vault_item.py
from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime, JSON, Index
from vaultkeep.app.db.base import Base


class VaultItem(Base):
    __tablename__ = "vault_items"
    __table_args__ = (
        Index("ix_vault_items_user_id_created_at", "user_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # --- METADATA (plaintext, searchable) ---
    title = Column(Text, nullable=False)
    # JSON list of strings, order preserved
    tags = Column(JSON, nullable=False, default=list)

    # --- SECRET DATA (opaque to the server) ---
    # Encrypted client-side; stored and returned byte for byte.
    encrypted_data = Column(Text, nullable=False)
    iv = Column(Text, nullable=False)

    # Set by the store in Python (microsecond precision) so that
    # updated_at strictly increases on every update.
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
