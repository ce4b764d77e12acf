"""
Journal service: entry persistence plus the owner-scoped query and
analytics engine.

Every function takes the caller's identity explicitly; nothing here reads
request state.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional, Tuple
from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session, selectinload
from journal_api.core.constants import (
    ANALYTICS, DEFAULTS, ERROR_MESSAGES, PAGINATION,
    AnalyticsPolicy, JournalSort, Mood, PaginationLimits
)
from journal_api.core.exceptions import BadRequestError, NotFoundError
from journal_api.core.utils import normalize_tags, to_utc_naive, utcnow
from journal_api.models.journal import JournalAttachment, JournalEntry, JournalTag
from journal_api.models.user import User
from journal_api.schemas.journal import JournalCreate, JournalUpdate, Location, Weather
from journal_api.services.ownership import ensure_owner

logger = logging.getLogger(__name__)

WEEK_SECONDS = 7 * 24 * 60 * 60

_SORT_COLUMNS = {
    JournalSort.CREATED_ASC: (JournalEntry.created_at, False),
    JournalSort.CREATED_DESC: (JournalEntry.created_at, True),
    JournalSort.UPDATED_ASC: (JournalEntry.updated_at, False),
    JournalSort.UPDATED_DESC: (JournalEntry.updated_at, True),
}


@dataclass
class JournalFilters:
    """Optional listing filters; all set filters must match."""
    mood: Optional[Mood] = None
    tags: List[str] = field(default_factory=list)
    is_favorite: Optional[bool] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    search: Optional[str] = None


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

def _apply_tags(entry: JournalEntry, tags: List[str]) -> None:
    """Replace the entry's tags, reusing rows for tags that are kept."""
    existing = {link.name: link for link in entry.tag_links}
    links = []
    for position, name in enumerate(normalize_tags(tags)):
        link = existing.pop(name, None) or JournalTag(name=name)
        link.position = position
        links.append(link)
    entry.tag_links = links


def _apply_location(entry: JournalEntry, location: Optional[Location]) -> None:
    if location is None or location.is_empty:
        entry.longitude = entry.latitude = entry.place_name = None
        return
    if location.coordinates:
        entry.longitude, entry.latitude = location.coordinates
    else:
        entry.longitude = entry.latitude = None
    entry.place_name = location.place_name


def _apply_weather(entry: JournalEntry, weather: Optional[Weather]) -> None:
    entry.weather_condition = weather.condition if weather else None
    entry.weather_temperature = weather.temperature if weather else None
    entry.weather_icon = weather.icon if weather else None


def _apply_attachments(entry: JournalEntry, attachments) -> None:
    entry.attachments = [JournalAttachment(**a.model_dump()) for a in attachments]


def get_owned_entry(db: Session, identity: User, entry_id: int) -> JournalEntry:
    """Load an entry by id: NotFoundError if absent, ForbiddenError if not the caller's."""
    entry = db.query(JournalEntry).filter(JournalEntry.id == entry_id).first()
    if not entry:
        raise NotFoundError(ERROR_MESSAGES["JOURNAL_NOT_FOUND"])
    return ensure_owner(identity, entry, ERROR_MESSAGES["JOURNAL_ACCESS_DENIED"])


def create_entry(db: Session, identity: User, data: JournalCreate) -> JournalEntry:
    """Create a journal entry owned by identity."""
    entry = JournalEntry(
        user_id=identity.id,
        title=data.title,
        content=data.content,
        mood=data.mood or DEFAULTS.mood,
        is_favorite=DEFAULTS.is_favorite if data.is_favorite is None else data.is_favorite,
        is_private=DEFAULTS.is_private if data.is_private is None else data.is_private,
    )
    _apply_tags(entry, data.tags)
    _apply_location(entry, data.location)
    _apply_weather(entry, data.weather)
    _apply_attachments(entry, data.attachments)

    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.debug(f"User {identity.id} created journal entry {entry.id}")
    return entry


def update_entry(db: Session, identity: User, entry_id: int, data: JournalUpdate) -> JournalEntry:
    """Update the provided fields of an entry. The owner never changes."""
    entry = get_owned_entry(db, identity, entry_id)
    updates = data.model_dump(exclude_unset=True)

    for name in ("title", "content", "is_favorite", "is_private"):
        if updates.get(name) is not None:
            setattr(entry, name, updates[name])
    if data.mood is not None:
        entry.mood = data.mood
    if data.tags is not None:
        _apply_tags(entry, data.tags)
    if "location" in updates:
        _apply_location(entry, data.location)
    if "weather" in updates:
        _apply_weather(entry, data.weather)
    if data.attachments is not None:
        _apply_attachments(entry, data.attachments)

    # Child-row changes alone do not touch the entry row
    entry.updated_at = utcnow()
    db.commit()
    db.refresh(entry)
    return entry


def delete_entry(db: Session, identity: User, entry_id: int) -> None:
    """Hard-delete an entry and its tags and attachments."""
    entry = get_owned_entry(db, identity, entry_id)
    db.delete(entry)
    db.commit()


def toggle_favorite(db: Session, identity: User, entry_id: int) -> JournalEntry:
    """Flip the favorite flag."""
    entry = get_owned_entry(db, identity, entry_id)
    entry.is_favorite = not entry.is_favorite
    db.commit()
    db.refresh(entry)
    return entry


# ---------------------------------------------------------------------------
# Query engine
# ---------------------------------------------------------------------------

def _owner_query(db: Session, identity: User) -> Query:
    return db.query(JournalEntry).filter(JournalEntry.user_id == identity.id)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _text_match(text: str):
    pattern = f"%{_escape_like(text)}%"
    return or_(
        JournalEntry.title.ilike(pattern, escape="\\"),
        JournalEntry.content.ilike(pattern, escape="\\"),
    )


def _with_children(query: Query) -> Query:
    return query.options(
        selectinload(JournalEntry.tag_links),
        selectinload(JournalEntry.attachments),
    )


def normalize_pagination(
    page: Optional[int],
    limit: Optional[int],
    limits: PaginationLimits = PAGINATION
) -> Tuple[int, int]:
    """Apply defaults, reject non-positive values and clamp limit to the maximum."""
    page = limits.default_page if page is None else page
    limit = limits.default_limit if limit is None else limit
    if page < 1:
        raise BadRequestError("Page must be a positive integer")
    if limit < 1:
        raise BadRequestError("Limit must be a positive integer")
    return page, min(limit, limits.max_limit)


def apply_filters(query: Query, filters: JournalFilters) -> Query:
    """Add the listing filters to an owner-scoped query."""
    if filters.mood is not None:
        query = query.filter(JournalEntry.mood == filters.mood)
    tags = normalize_tags(filters.tags)
    if tags:
        query = query.filter(JournalEntry.tag_links.any(JournalTag.name.in_(tags)))
    if filters.is_favorite is not None:
        query = query.filter(JournalEntry.is_favorite == filters.is_favorite)
    if filters.start_date is not None:
        query = query.filter(JournalEntry.created_at >= to_utc_naive(filters.start_date))
    if filters.end_date is not None:
        query = query.filter(JournalEntry.created_at <= to_utc_naive(filters.end_date))
    if filters.search and filters.search.strip():
        query = query.filter(_text_match(filters.search.strip()))
    return query


def list_entries(
    db: Session,
    identity: User,
    filters: Optional[JournalFilters] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    sort: JournalSort = JournalSort.CREATED_DESC,
    limits: PaginationLimits = PAGINATION
) -> Tuple[List[JournalEntry], int, int, int]:
    """
    List the caller's entries.

    Returns (items, total, page, limit) where total counts every entry that
    matches the filters and limit is the effective, clamped page size.
    """
    page, limit = normalize_pagination(page, limit, limits)
    query = apply_filters(_owner_query(db, identity), filters or JournalFilters())
    total = query.count()

    column, descending = _SORT_COLUMNS[JournalSort(sort)]
    if descending:
        ordering = (column.desc(), JournalEntry.id.desc())
    else:
        ordering = (column.asc(), JournalEntry.id.asc())

    items = _with_children(query).order_by(*ordering).offset((page - 1) * limit).limit(limit).all()
    return items, total, page, limit


def search_entries(db: Session, identity: User, text: Optional[str]) -> List[JournalEntry]:
    """Entries whose title or content contains text, newest first."""
    if not text or not text.strip():
        raise BadRequestError(ERROR_MESSAGES["SEARCH_REQUIRED"])
    query = _owner_query(db, identity).filter(_text_match(text.strip()))
    return _with_children(query).order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc()).all()


def mood_counts(db: Session, identity: User) -> Dict[str, int]:
    """Number of entries per mood, most frequent first."""
    count = func.count(JournalEntry.id)
    rows = (
        db.query(JournalEntry.mood, count)
        .filter(JournalEntry.user_id == identity.id)
        .group_by(JournalEntry.mood)
        .order_by(count.desc(), JournalEntry.mood)
        .all()
    )
    return {Mood(mood).value: n for mood, n in rows}


def tag_frequency(db: Session, identity: User, top: int = ANALYTICS.top_tags) -> List[dict]:
    """Most used tags; ties go to the tag that was first used earliest."""
    count = func.count(JournalTag.id)
    rows = (
        db.query(JournalTag.name, count)
        .join(JournalEntry, JournalTag.entry_id == JournalEntry.id)
        .filter(JournalEntry.user_id == identity.id)
        .group_by(JournalTag.name)
        .order_by(count.desc(), func.min(JournalTag.id))
        .limit(top)
        .all()
    )
    return [{"tag": name, "count": n} for name, n in rows]


def _midnight_utc(day: date, tzinfo) -> datetime:
    """Storage form of local midnight on day. tzinfo None means server-local time."""
    return to_utc_naive(datetime.combine(day, time.min, tzinfo=tzinfo))


def week_start(now: datetime) -> datetime:
    """Start of the Sunday-based week containing now, in storage form."""
    days_since_sunday = (now.weekday() + 1) % 7
    return _midnight_utc(now.date() - timedelta(days=days_since_sunday), now.tzinfo)


def month_start(now: datetime) -> datetime:
    """First day of now's month at midnight, in storage form."""
    return _midnight_utc(now.date().replace(day=1), now.tzinfo)


def average_per_week(total: int, oldest: Optional[datetime], now_utc: datetime) -> float:
    """Entries per week since the oldest entry, with at least one week elapsed."""
    if total == 0 or oldest is None:
        return 0
    weeks = max((now_utc - oldest).total_seconds() / WEEK_SECONDS, 1)
    return round(total / weeks, 1)


def journal_analytics(
    db: Session,
    identity: User,
    now: Optional[datetime] = None,
    policy: AnalyticsPolicy = ANALYTICS
) -> dict:
    """
    Analytics snapshot for the caller.

    now defaults to the current server-local time; a naive value is read as
    server-local, an aware one defines the calendar used for week and month
    boundaries. Facets are computed by separate queries and are not isolated
    from concurrent writes.
    """
    if now is None:
        now = datetime.now()
    now_utc = to_utc_naive(now)
    base = _owner_query(db, identity)

    total = base.count()
    this_week = base.filter(JournalEntry.created_at >= week_start(now)).count()
    this_month = base.filter(JournalEntry.created_at >= month_start(now)).count()
    favorites = base.filter(JournalEntry.is_favorite == True).count()  # noqa: E712
    oldest = (
        db.query(func.min(JournalEntry.created_at))
        .filter(JournalEntry.user_id == identity.id)
        .scalar()
    )

    return {
        "total_journals": total,
        "journals_this_week": this_week,
        "journals_this_month": this_month,
        "most_used_tags": tag_frequency(db, identity, policy.top_tags),
        "mood_distribution": mood_counts(db, identity),
        "favorite_count": favorites,
        "average_per_week": average_per_week(total, oldest, now_utc),
    }
