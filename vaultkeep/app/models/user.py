# vaultkeep/app/models/user.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from vaultkeep.app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)

    # Login credential only. Never used by the vault.
    hashed_password = Column(String(255), nullable=False)

    # One-way verifier of the master key (bcrypt over SHA-256).
    # Nullable: accounts may exist before a master key is chosen.
    master_key_hash = Column(String(255), nullable=True)

    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
