"""
Declarative base and the shared model mixin.
"""
from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from journal_api.core.utils import utcnow

Base = declarative_base()


class BaseModel(Base):
    """Abstract model with a primary key and naive-UTC timestamps."""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
