"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from folio.domain.value.common import RootValueObject


class DateRange(str, Enum):
    """Publication window a reader can narrow discovery to."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class NotificationType(str, Enum):
    """Kind of event a notification was raised for."""

    NEW_POST = "new_post"
    COMMENT = "comment"
    LIKE = "like"
    FOLLOW = "follow"


class UserRole(str, Enum):
    """Role carried in the session token."""

    USER = "user"
    ADMIN = "admin"


class Slug(RootValueObject[str]):
    """URL-safe slug for categories.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'rust', 'web-development'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v


class HexColor(RootValueObject[str]):
    """Display color for a category, e.g. '#3b82f6'."""

    @field_validator("root")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate six-digit hex color."""
        if not re.match(r"^#[0-9a-fA-F]{6}$", v):
            raise ValueError("Color must be a hex value like #3b82f6")
        return v.lower()
