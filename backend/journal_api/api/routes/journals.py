"""
Journal entry routes: CRUD, filtered listing, search and statistics.
"""
import math
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from datetime import datetime
from journal_api.core.constants import PAGINATION, SUCCESS_MESSAGES, JournalSort, Mood
from journal_api.core.utils import format_response
from journal_api.db.session import get_db
from journal_api.models.user import User
from journal_api.schemas.common import ApiResponse, MessageResponse
from journal_api.schemas.journal import (
    JournalAnalytics, JournalCreate, JournalList, JournalResponse, JournalUpdate
)
from journal_api.services import journal_service
from journal_api.services.journal_service import JournalFilters
from journal_api.api.dependencies import get_current_user

router = APIRouter(prefix="/journals", tags=["journals"])


@router.get("", response_model=ApiResponse[JournalList])
async def list_journals(
    page: int = Query(PAGINATION.default_page, ge=1),
    limit: int = Query(PAGINATION.default_limit, ge=1),
    mood: Optional[Mood] = None,
    tags: Optional[str] = Query(None, description="Comma-separated tag list"),
    search: Optional[str] = None,
    is_favorite: Optional[bool] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    sort: JournalSort = JournalSort.CREATED_DESC,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's entries. limit above the maximum is clamped."""
    filters = JournalFilters(
        mood=mood,
        tags=tags.split(",") if tags else [],
        is_favorite=is_favorite,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )
    items, total, page, limit = journal_service.list_entries(
        db, current_user, filters, page=page, limit=limit, sort=sort
    )
    return format_response({
        "journals": items,
        "pagination": {
            "total": total,
            "total_pages": math.ceil(total / limit),
            "current_page": page,
            "limit": limit,
        },
    })


@router.get("/search", response_model=ApiResponse[List[JournalResponse]])
async def search_journals(
    q: Optional[str] = Query(None, max_length=100),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Search title and content (case-insensitive substring)."""
    return format_response(journal_service.search_entries(db, current_user, q))


@router.get("/stats/mood", response_model=ApiResponse[Dict[str, int]])
async def get_mood_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Entry count per mood."""
    return format_response(journal_service.mood_counts(db, current_user))


@router.get("/stats/analytics", response_model=ApiResponse[JournalAnalytics])
async def get_analytics(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Totals, weekly/monthly counts, top tags, moods, favorites and weekly average."""
    return format_response(journal_service.journal_analytics(db, current_user))


@router.post("", response_model=ApiResponse[JournalResponse], status_code=status.HTTP_201_CREATED)
async def create_journal(
    journal_data: JournalCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a journal entry."""
    entry = journal_service.create_entry(db, current_user, journal_data)
    return format_response(entry, SUCCESS_MESSAGES["JOURNAL_CREATED"])


@router.get("/{entry_id}", response_model=ApiResponse[JournalResponse])
async def get_journal(
    entry_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get one of the caller's entries."""
    return format_response(journal_service.get_owned_entry(db, current_user, entry_id))


@router.put("/{entry_id}", response_model=ApiResponse[JournalResponse])
async def update_journal(
    entry_id: int,
    journal_data: JournalUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a journal entry."""
    entry = journal_service.update_entry(db, current_user, entry_id, journal_data)
    return format_response(entry, SUCCESS_MESSAGES["JOURNAL_UPDATED"])


@router.delete("/{entry_id}", response_model=MessageResponse)
async def delete_journal(
    entry_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a journal entry."""
    journal_service.delete_entry(db, current_user, entry_id)
    return format_response(message=SUCCESS_MESSAGES["JOURNAL_DELETED"])


@router.put("/{entry_id}/favorite", response_model=ApiResponse[JournalResponse])
async def toggle_favorite(
    entry_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Toggle the favorite flag."""
    entry = journal_service.toggle_favorite(db, current_user, entry_id)
    message = "Journal marked as favorite" if entry.is_favorite else "Journal removed from favorites"
    return format_response(entry, message)
