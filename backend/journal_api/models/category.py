"""
Category model for grouping journal entries.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from journal_api.core.constants import DEFAULTS
from journal_api.db.base import BaseModel


class Category(BaseModel):
    """User-owned category; names are unique per owner, ignoring case."""
    __tablename__ = "categories"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    # casefold() can expand one character into up to three ("ß" -> "ss")
    normalized_name = Column(String(150), nullable=False)
    color = Column(String(7), default=DEFAULTS.category_color, nullable=False)
    icon = Column(String(50), nullable=True)
    description = Column(String(200), nullable=True)

    # Relationships
    user = relationship("User", back_populates="categories")

    # Unique constraint: one category name per user
    __table_args__ = (
        UniqueConstraint('user_id', 'normalized_name', name='uq_user_category_name'),
    )
