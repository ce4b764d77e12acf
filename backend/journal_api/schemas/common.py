"""
Shared response envelope schemas.
"""
from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope every successful response is wrapped in."""
    success: bool = True
    message: Optional[str] = None
    data: Optional[DataT] = None


class MessageResponse(BaseModel):
    """Envelope for responses that carry no data."""
    success: bool = True
    message: str


class FieldError(BaseModel):
    """One entry of a validation failure list."""
    field: str
    message: str


class Pagination(BaseModel):
    """Pagination block of a listing response."""
    total: int
    total_pages: int
    current_page: int
    limit: int
