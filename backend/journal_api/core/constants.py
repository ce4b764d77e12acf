"""
Fixed value tables shared by models, schemas and services.

Everything here is immutable; services receive these structures as
defaulted parameters so tests can pass their own.
"""
import enum
from dataclasses import dataclass
from types import MappingProxyType


class Mood(str, enum.Enum):
    """Mood attached to a journal entry."""
    HAPPY = "happy"
    SAD = "sad"
    EXCITED = "excited"
    ANXIOUS = "anxious"
    CALM = "calm"
    ANGRY = "angry"
    NEUTRAL = "neutral"
    GRATEFUL = "grateful"
    TIRED = "tired"
    MOTIVATED = "motivated"


class PromptCategory(str, enum.Enum):
    """Category of a writing prompt."""
    REFLECTION = "reflection"
    GRATITUDE = "gratitude"
    GOALS = "goals"
    CREATIVITY = "creativity"
    MINDFULNESS = "mindfulness"
    RELATIONSHIPS = "relationships"
    PERSONAL_GROWTH = "personal_growth"


class Theme(str, enum.Enum):
    """UI theme preference."""
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class Role(str, enum.Enum):
    """Account role."""
    USER = "user"
    ADMIN = "admin"


class JournalSort(str, enum.Enum):
    """Accepted sort keys for journal listings; a leading '-' means descending."""
    CREATED_ASC = "createdAt"
    CREATED_DESC = "-createdAt"
    UPDATED_ASC = "updatedAt"
    UPDATED_DESC = "-updatedAt"


@dataclass(frozen=True)
class LengthBounds:
    min_length: int
    max_length: int


@dataclass(frozen=True)
class ValidationRules:
    username: LengthBounds = LengthBounds(3, 30)
    password: LengthBounds = LengthBounds(6, 10)
    journal_title: LengthBounds = LengthBounds(1, 200)
    journal_content: LengthBounds = LengthBounds(1, 50000)
    tag: LengthBounds = LengthBounds(1, 10)
    max_tags: int = 10
    category_name: LengthBounds = LengthBounds(1, 50)
    category_description_max: int = 200
    category_icon_max: int = 50
    prompt_text: LengthBounds = LengthBounds(10, 500)
    first_name_max: int = 20
    last_name_max: int = 20
    bio_max: int = 500
    place_name_max: int = 100


@dataclass(frozen=True)
class PaginationLimits:
    default_page: int = 1
    default_limit: int = 10
    max_limit: int = 100


@dataclass(frozen=True)
class AttachmentPolicy:
    allowed_types: frozenset = frozenset({
        "image/jpeg", "image/png", "image/gif", "image/webp",
        "application/pdf", "text/plain",
    })
    max_size: int = 5 * 1024 * 1024  # 5MB


@dataclass(frozen=True)
class AnalyticsPolicy:
    top_tags: int = 10


@dataclass(frozen=True)
class Defaults:
    mood: Mood = Mood.NEUTRAL
    theme: Theme = Theme.AUTO
    timezone: str = "IST"
    is_private: bool = True
    is_favorite: bool = False
    category_color: str = "#3b82f6"


VALIDATION = ValidationRules()
PAGINATION = PaginationLimits()
ATTACHMENTS = AttachmentPolicy()
ANALYTICS = AnalyticsPolicy()
DEFAULTS = Defaults()

USERNAME_PATTERN = r"^[a-zA-Z0-9_-]+$"
HEX_COLOR_PATTERN = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"
URL_PATTERN = r"^https?://.+"
REMINDER_TIME_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"

ERROR_MESSAGES = MappingProxyType({
    "INVALID_CREDENTIALS": "Invalid email or password",
    "USERNAME_EXISTS": "Username already taken",
    "EMAIL_EXISTS": "Email already registered",
    "UNAUTHORIZED": "Not authorized to access this resource",
    "ACCOUNT_INACTIVE": "User account is inactive",
    "ADMIN_REQUIRED": "Access denied. Admin privileges required.",
    "VALIDATION_FAILED": "Validation failed",
    "SEARCH_REQUIRED": "Search query is required",
    "JOURNAL_NOT_FOUND": "Journal entry not found",
    "JOURNAL_ACCESS_DENIED": "You do not have access to this journal",
    "CATEGORY_NOT_FOUND": "Category not found",
    "CATEGORY_ACCESS_DENIED": "You do not have access to this category",
    "CATEGORY_EXISTS": "Category with this name already exists",
    "PROMPT_NOT_FOUND": "Prompt not found",
    "PROMPT_EXISTS": "Prompt with this text already exists",
    "SERVER_ERROR": "Internal server error",
})

SUCCESS_MESSAGES = MappingProxyType({
    "REGISTERED": "User registered successfully",
    "LOGGED_IN": "Login success",
    "LOGGED_OUT": "Logged out successfully",
    "JOURNAL_CREATED": "Journal entry created successfully",
    "JOURNAL_UPDATED": "Journal entry updated successfully",
    "JOURNAL_DELETED": "Journal entry deleted successfully",
    "CATEGORY_CREATED": "Category created successfully",
    "CATEGORY_UPDATED": "Category updated successfully",
    "CATEGORY_DELETED": "Category deleted successfully",
    "PROMPT_CREATED": "Prompt created successfully",
    "PROMPT_UPDATED": "Prompt updated successfully",
    "PROMPT_DELETED": "Prompt deleted successfully",
    "PROFILE_UPDATED": "Profile updated successfully",
    "PREFERENCES_UPDATED": "Preferences updated successfully",
    "PASSWORD_CHANGED": "Password changed successfully",
})
