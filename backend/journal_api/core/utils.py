"""
Utility functions for the application.
"""
from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the form timestamps are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(value: datetime) -> datetime:
    """Convert a datetime to naive UTC. Naive input is read as server-local time."""
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def normalize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """
    Trim, lowercase and deduplicate tags, dropping empty ones.

    First occurrence wins, so applying this twice gives the same list.
    """
    normalized = []
    for tag in tags or []:
        if tag is None:
            continue
        cleaned = str(tag).strip().lower()
        if cleaned and cleaned not in normalized:
            normalized.append(cleaned)
    return normalized


def format_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Format a successful API response."""
    response: Dict[str, Any] = {"success": True}
    if message:
        response["message"] = message
    if data is not None:
        response["data"] = data
    return response


def format_error(message: str, errors: Any = None, detail: Optional[str] = None) -> Dict[str, Any]:
    """Format error response."""
    response: Dict[str, Any] = {"success": False, "message": message}
    if errors:
        response["errors"] = errors
    if detail:
        response["detail"] = detail
    return response
