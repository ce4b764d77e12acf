"""
Category management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from journal_api.core.constants import SUCCESS_MESSAGES
from journal_api.core.utils import format_response
from journal_api.db.session import get_db
from journal_api.models.user import User
from journal_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from journal_api.schemas.common import ApiResponse, MessageResponse
from journal_api.services import category_service
from journal_api.api.dependencies import get_current_user

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=ApiResponse[List[CategoryResponse]])
async def list_categories(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's categories by name."""
    return format_response(category_service.list_categories(db, current_user))


@router.post("", response_model=ApiResponse[CategoryResponse], status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a category. 409 if the caller already has one with this name."""
    category = category_service.create_category(db, current_user, category_data)
    return format_response(category, SUCCESS_MESSAGES["CATEGORY_CREATED"])


@router.get("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def get_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get one of the caller's categories."""
    return format_response(category_service.get_owned_category(db, current_user, category_id))


@router.put("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a category."""
    category = category_service.update_category(db, current_user, category_id, category_data)
    return format_response(category, SUCCESS_MESSAGES["CATEGORY_UPDATED"])


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a category."""
    category_service.delete_category(db, current_user, category_id)
    return format_response(message=SUCCESS_MESSAGES["CATEGORY_DELETED"])
