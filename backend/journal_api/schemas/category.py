"""
Pydantic schemas for Category entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from journal_api.core.constants import VALIDATION, HEX_COLOR_PATTERN


class CategoryBase(BaseModel):
    """Base category schema."""
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    icon: Optional[str] = Field(None, max_length=VALIDATION.category_icon_max)
    description: Optional[str] = Field(None, max_length=VALIDATION.category_description_max)

    @field_validator("color", "icon", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class CategoryCreate(CategoryBase):
    """Schema for category creation."""
    name: str = Field(
        min_length=VALIDATION.category_name.min_length,
        max_length=VALIDATION.category_name.max_length,
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class CategoryUpdate(CategoryBase):
    """Schema for category update."""
    name: Optional[str] = Field(
        None,
        min_length=VALIDATION.category_name.min_length,
        max_length=VALIDATION.category_name.max_length,
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class CategoryResponse(BaseModel):
    """Schema for category response."""
    id: int
    user_id: int
    name: str
    color: str
    icon: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
