"""
Journal prompt routes. Reads are public; writes need an admin.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from journal_api.core.constants import SUCCESS_MESSAGES, PromptCategory
from journal_api.core.utils import format_response
from journal_api.db.session import get_db
from journal_api.models.user import User
from journal_api.schemas.common import ApiResponse, MessageResponse
from journal_api.schemas.prompt import PromptCreate, PromptResponse, PromptUpdate
from journal_api.services import prompt_service
from journal_api.api.dependencies import get_current_admin

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("", response_model=ApiResponse[List[PromptResponse]])
async def list_prompts(db: Session = Depends(get_db)):
    """All active prompts."""
    return format_response(prompt_service.list_active_prompts(db))


@router.get("/random", response_model=ApiResponse[PromptResponse])
async def get_random_prompt(
    category: Optional[PromptCategory] = None,
    db: Session = Depends(get_db)
):
    """A random active prompt; data is null when none exist."""
    return format_response(prompt_service.random_prompt(db, category))


@router.get("/category/{category}", response_model=ApiResponse[List[PromptResponse]])
async def get_prompts_by_category(category: PromptCategory, db: Session = Depends(get_db)):
    """Active prompts in a category."""
    return format_response(prompt_service.prompts_by_category(db, category))


@router.post("", response_model=ApiResponse[PromptResponse], status_code=status.HTTP_201_CREATED)
async def create_prompt(
    prompt_data: PromptCreate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Create a prompt (admin only)."""
    prompt = prompt_service.create_prompt(db, prompt_data)
    return format_response(prompt, SUCCESS_MESSAGES["PROMPT_CREATED"])


@router.put("/{prompt_id}", response_model=ApiResponse[PromptResponse])
async def update_prompt(
    prompt_id: int,
    prompt_data: PromptUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Update a prompt (admin only)."""
    prompt = prompt_service.update_prompt(db, prompt_id, prompt_data)
    return format_response(prompt, SUCCESS_MESSAGES["PROMPT_UPDATED"])


@router.delete("/{prompt_id}", response_model=MessageResponse)
async def delete_prompt(
    prompt_id: int,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Delete a prompt (admin only)."""
    prompt_service.delete_prompt(db, prompt_id)
    return format_response(message=SUCCESS_MESSAGES["PROMPT_DELETED"])
