"""
Ownership policy for user-owned resources (journal entries, categories).
"""
from typing import Optional
from journal_api.core.exceptions import ForbiddenError
from journal_api.models.user import User


def owns_resource(identity: User, resource) -> bool:
    """True iff the resource's owner is the identity."""
    return str(resource.user_id) == str(identity.id)


def ensure_owner(identity: User, resource, message: Optional[str] = None):
    """Raise ForbiddenError unless identity owns resource; returns the resource."""
    if not owns_resource(identity, resource):
        raise ForbiddenError(message)
    return resource
