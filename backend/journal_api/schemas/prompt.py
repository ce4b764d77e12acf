"""
Pydantic schemas for journal prompts.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from journal_api.core.constants import VALIDATION, PromptCategory


class PromptCreate(BaseModel):
    """Schema for prompt creation (admin only)."""
    text: str = Field(
        min_length=VALIDATION.prompt_text.min_length,
        max_length=VALIDATION.prompt_text.max_length,
    )
    category: PromptCategory
    is_active: bool = True

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class PromptUpdate(BaseModel):
    """Schema for prompt update (admin only)."""
    text: Optional[str] = Field(
        None,
        min_length=VALIDATION.prompt_text.min_length,
        max_length=VALIDATION.prompt_text.max_length,
    )
    category: Optional[PromptCategory] = None
    is_active: Optional[bool] = None

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class PromptResponse(BaseModel):
    """Schema for prompt response."""
    id: int
    text: str
    category: PromptCategory
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
