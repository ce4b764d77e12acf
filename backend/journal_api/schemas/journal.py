"""
Pydantic schemas for Journal entries.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, List, Optional
from datetime import datetime
from journal_api.core.constants import ATTACHMENTS, VALIDATION, URL_PATTERN, Mood
from journal_api.core.utils import normalize_tags
from journal_api.schemas.common import Pagination


def _validate_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    if tags is None:
        return None
    tags = normalize_tags(tags)
    if len(tags) > VALIDATION.max_tags:
        raise ValueError(f"Cannot have more than {VALIDATION.max_tags} tags")
    for tag in tags:
        if len(tag) > VALIDATION.tag.max_length:
            raise ValueError(f"Tag '{tag}' cannot exceed {VALIDATION.tag.max_length} characters")
    return tags


class Location(BaseModel):
    """Coordinates are [longitude, latitude]."""
    coordinates: Optional[List[float]] = None
    place_name: Optional[str] = Field(None, max_length=VALIDATION.place_name_max)

    @field_validator("coordinates")
    @classmethod
    def check_coordinates(cls, v):
        if not v:
            return None
        if len(v) != 2 or not (-180 <= v[0] <= 180) or not (-90 <= v[1] <= 90):
            raise ValueError(
                "Invalid coordinates. Longitude must be between -180 and 180, "
                "Latitude between -90 and 90"
            )
        return v

    @property
    def is_empty(self) -> bool:
        return self.coordinates is None and not self.place_name


class Weather(BaseModel):
    condition: Optional[str] = Field(None, max_length=100)
    temperature: Optional[float] = Field(None, ge=-100, le=100)
    icon: Optional[str] = Field(None, max_length=100)


class Attachment(BaseModel):
    file_name: str = Field(min_length=1, max_length=255)
    file_url: str = Field(pattern=URL_PATTERN, max_length=500)
    file_type: Optional[str] = None
    file_size: Optional[int] = Field(None, ge=0, le=ATTACHMENTS.max_size)

    @field_validator("file_type")
    @classmethod
    def check_file_type(cls, v):
        if v is not None and v not in ATTACHMENTS.allowed_types:
            raise ValueError(f"{v} is not a supported file type")
        return v

    class Config:
        from_attributes = True


class JournalCreate(BaseModel):
    """Schema for journal entry creation."""
    title: str = Field(
        min_length=VALIDATION.journal_title.min_length,
        max_length=VALIDATION.journal_title.max_length,
    )
    content: str = Field(
        min_length=VALIDATION.journal_content.min_length,
        max_length=VALIDATION.journal_content.max_length,
    )
    mood: Optional[Mood] = None
    tags: List[str] = []
    is_favorite: Optional[bool] = None
    is_private: Optional[bool] = None
    location: Optional[Location] = None
    weather: Optional[Weather] = None
    attachments: List[Attachment] = []

    @field_validator("mood", mode="before")
    @classmethod
    def lower_mood(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v):
        return _validate_tags(v)


class JournalUpdate(BaseModel):
    """Schema for journal entry update. Only provided fields change."""
    title: Optional[str] = Field(
        None,
        min_length=VALIDATION.journal_title.min_length,
        max_length=VALIDATION.journal_title.max_length,
    )
    content: Optional[str] = Field(
        None,
        min_length=VALIDATION.journal_content.min_length,
        max_length=VALIDATION.journal_content.max_length,
    )
    mood: Optional[Mood] = None
    tags: Optional[List[str]] = None
    is_favorite: Optional[bool] = None
    is_private: Optional[bool] = None
    location: Optional[Location] = None
    weather: Optional[Weather] = None
    attachments: Optional[List[Attachment]] = None

    @field_validator("mood", mode="before")
    @classmethod
    def lower_mood(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v):
        return _validate_tags(v)

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in ("title", "content"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class LocationResponse(BaseModel):
    coordinates: Optional[List[float]] = None
    place_name: Optional[str] = None


class JournalResponse(BaseModel):
    """Schema for journal entry response."""
    id: int
    user_id: int
    title: str
    content: str
    mood: Mood
    tags: List[str] = []
    is_favorite: bool
    is_private: bool
    location: Optional[LocationResponse] = None
    weather: Optional[Weather] = None
    attachments: List[Attachment] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class JournalList(BaseModel):
    """Paginated journal listing."""
    journals: List[JournalResponse]
    pagination: Pagination


class TagCount(BaseModel):
    tag: str
    count: int


class JournalAnalytics(BaseModel):
    """Analytics snapshot for the caller's entries."""
    total_journals: int
    journals_this_week: int
    journals_this_month: int
    most_used_tags: List[TagCount]
    mood_distribution: Dict[str, int]
    favorite_count: int
    average_per_week: float
