"""
Category service: per-user categories with unique names.

Name uniqueness is enforced by the (user_id, normalized_name) constraint;
a violation surfaces as ConflictError rather than a validation error.
"""
import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from journal_api.core.constants import DEFAULTS, ERROR_MESSAGES
from journal_api.core.exceptions import ConflictError, NotFoundError
from journal_api.models.category import Category
from journal_api.models.user import User
from journal_api.schemas.category import CategoryCreate, CategoryUpdate
from journal_api.services.ownership import ensure_owner

logger = logging.getLogger(__name__)


def normalize_category_name(name: str) -> str:
    """Key used for uniqueness: trimmed and case-folded."""
    return name.strip().casefold()


def _commit_unique(db: Session, category: Category) -> Category:
    name, owner_id = category.name, category.user_id
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Duplicate category name '{name}' for user {owner_id}")
        raise ConflictError(ERROR_MESSAGES["CATEGORY_EXISTS"])
    db.refresh(category)
    return category


def list_categories(db: Session, identity: User) -> List[Category]:
    """The caller's categories sorted by name."""
    return db.query(Category).filter(
        Category.user_id == identity.id
    ).order_by(Category.name).all()


def get_owned_category(db: Session, identity: User, category_id: int) -> Category:
    """Load a category by id: NotFoundError if absent, ForbiddenError if not the caller's."""
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        raise NotFoundError(ERROR_MESSAGES["CATEGORY_NOT_FOUND"])
    return ensure_owner(identity, category, ERROR_MESSAGES["CATEGORY_ACCESS_DENIED"])


def create_category(db: Session, identity: User, data: CategoryCreate) -> Category:
    """Create a category; ConflictError if the caller already has one with this name."""
    category = Category(
        user_id=identity.id,
        name=data.name,
        normalized_name=normalize_category_name(data.name),
        color=data.color or DEFAULTS.category_color,
        icon=data.icon,
        description=data.description,
    )
    db.add(category)
    return _commit_unique(db, category)


def update_category(db: Session, identity: User, category_id: int, data: CategoryUpdate) -> Category:
    """Update provided fields; renaming onto another of the caller's names is a conflict."""
    category = get_owned_category(db, identity, category_id)
    updates = data.model_dump(exclude_unset=True)

    if updates.get("name") is not None:
        category.name = data.name
        category.normalized_name = normalize_category_name(data.name)
    if "color" in updates:
        category.color = data.color or DEFAULTS.category_color
    if "icon" in updates:
        category.icon = data.icon
    if "description" in updates:
        category.description = data.description

    return _commit_unique(db, category)


def delete_category(db: Session, identity: User, category_id: int) -> None:
    """Hard-delete a category."""
    category = get_owned_category(db, identity, category_id)
    db.delete(category)
    db.commit()
