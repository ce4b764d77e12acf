"""
Journal entry model with its tags and attachments.
"""
from sqlalchemy import (
    Column, String, Text, Boolean, Float, ForeignKey, Integer, Index,
    UniqueConstraint, Enum as SQLEnum
)
from sqlalchemy.orm import relationship
from journal_api.core.constants import DEFAULTS, Mood
from journal_api.db.base import BaseModel


class JournalEntry(BaseModel):
    """A journal entry owned by exactly one user."""
    __tablename__ = "journal_entries"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    mood = Column(SQLEnum(Mood), default=DEFAULTS.mood, nullable=False)
    is_favorite = Column(Boolean, default=DEFAULTS.is_favorite, nullable=False)
    is_private = Column(Boolean, default=DEFAULTS.is_private, nullable=False)

    # Location (longitude/latitude are set together or not at all)
    longitude = Column(Float, nullable=True)
    latitude = Column(Float, nullable=True)
    place_name = Column(String(100), nullable=True)

    # Weather snapshot
    weather_condition = Column(String(100), nullable=True)
    weather_temperature = Column(Float, nullable=True)
    weather_icon = Column(String(100), nullable=True)

    # Relationships
    user = relationship("User", back_populates="journal_entries")
    tag_links = relationship(
        "JournalTag", back_populates="entry",
        cascade="all, delete-orphan", order_by="JournalTag.position"
    )
    attachments = relationship(
        "JournalAttachment", back_populates="entry",
        cascade="all, delete-orphan", order_by="JournalAttachment.id"
    )

    __table_args__ = (
        Index("ix_journal_user_created", "user_id", "created_at"),
        Index("ix_journal_user_mood", "user_id", "mood"),
        Index("ix_journal_user_favorite", "user_id", "is_favorite"),
    )

    @property
    def tags(self) -> list:
        return [link.name for link in self.tag_links]

    @property
    def location(self):
        if self.longitude is None and self.place_name is None:
            return None
        coordinates = None
        if self.longitude is not None and self.latitude is not None:
            coordinates = [self.longitude, self.latitude]
        return {"coordinates": coordinates, "place_name": self.place_name}

    @property
    def weather(self):
        if self.weather_condition is None and self.weather_temperature is None and self.weather_icon is None:
            return None
        return {
            "condition": self.weather_condition,
            "temperature": self.weather_temperature,
            "icon": self.weather_icon,
        }


class JournalTag(BaseModel):
    """One normalized tag on a journal entry."""
    __tablename__ = "journal_tags"

    entry_id = Column(Integer, ForeignKey("journal_entries.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(10), nullable=False, index=True)
    position = Column(Integer, default=0, nullable=False)

    # Relationships
    entry = relationship("JournalEntry", back_populates="tag_links")

    # Unique constraint: a tag appears once per entry
    __table_args__ = (
        UniqueConstraint('entry_id', 'name', name='uq_journal_tag'),
    )


class JournalAttachment(BaseModel):
    """Attachment reference (URL only, no stored file)."""
    __tablename__ = "journal_attachments"

    entry_id = Column(Integer, ForeignKey("journal_entries.id", ondelete="CASCADE"), nullable=False, index=True)
    file_name = Column(String(255), nullable=False)
    file_url = Column(String(500), nullable=False)
    file_type = Column(String(50), nullable=True)
    file_size = Column(Integer, nullable=True)

    # Relationships
    entry = relationship("JournalEntry", back_populates="attachments")
