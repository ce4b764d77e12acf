"""
Prompt service for the shared catalogue of writing prompts.
"""
import logging
import random
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from journal_api.core.constants import ERROR_MESSAGES, PromptCategory
from journal_api.core.exceptions import ConflictError, NotFoundError
from journal_api.models.prompt import JournalPrompt
from journal_api.schemas.prompt import PromptCreate, PromptUpdate

logger = logging.getLogger(__name__)


def _active(db: Session, category: Optional[PromptCategory] = None):
    query = db.query(JournalPrompt).filter(JournalPrompt.is_active == True)  # noqa: E712
    if category is not None:
        query = query.filter(JournalPrompt.category == category)
    return query


def _commit_unique(db: Session, prompt: JournalPrompt) -> JournalPrompt:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Rejected duplicate prompt text")
        raise ConflictError(ERROR_MESSAGES["PROMPT_EXISTS"])
    db.refresh(prompt)
    return prompt


def list_active_prompts(db: Session) -> List[JournalPrompt]:
    """Active prompts grouped by category, newest first within a category."""
    return _active(db).order_by(
        JournalPrompt.category, JournalPrompt.created_at.desc(), JournalPrompt.id.desc()
    ).all()


def prompts_by_category(db: Session, category: PromptCategory) -> List[JournalPrompt]:
    """Active prompts in one category, newest first."""
    return _active(db, category).order_by(
        JournalPrompt.created_at.desc(), JournalPrompt.id.desc()
    ).all()


def random_prompt(
    db: Session,
    category: Optional[PromptCategory] = None,
    rng: random.Random = None
) -> Optional[JournalPrompt]:
    """A uniformly chosen active prompt, or None when there is none."""
    query = _active(db, category)
    total = query.count()
    if total == 0:
        return None
    index = (rng or random).randrange(total)
    return query.order_by(JournalPrompt.id).offset(index).first()


def get_prompt(db: Session, prompt_id: int) -> JournalPrompt:
    prompt = db.query(JournalPrompt).filter(JournalPrompt.id == prompt_id).first()
    if not prompt:
        raise NotFoundError(ERROR_MESSAGES["PROMPT_NOT_FOUND"])
    return prompt


def create_prompt(db: Session, data: PromptCreate) -> JournalPrompt:
    prompt = JournalPrompt(text=data.text, category=data.category, is_active=data.is_active)
    db.add(prompt)
    return _commit_unique(db, prompt)


def update_prompt(db: Session, prompt_id: int, data: PromptUpdate) -> JournalPrompt:
    prompt = get_prompt(db, prompt_id)
    for name, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(prompt, name, value)
    return _commit_unique(db, prompt)


def delete_prompt(db: Session, prompt_id: int) -> None:
    prompt = get_prompt(db, prompt_id)
    db.delete(prompt)
    db.commit()
