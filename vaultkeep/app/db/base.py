# vaultkeep/app/db/base.py
"""
SQLAlchemy declarative base.

All ORM models inherit from ``Base``; session handling lives in
``db/session.py``.
"""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Usage:
        class User(Base):
            __tablename__ = "users"
            id = Column(Integer, primary_key=True)
            ...
    """
    pass


__all__ = ["Base"]
