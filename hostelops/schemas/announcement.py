from pydantic import BaseModel, computed_field, field_validator, Field
from typing import Optional
from datetime import datetime
from ..models.enums import AnnouncementCategory, AnnouncementPriority
from ..utils.constants import AppConstants
from ..utils.date_helpers import DateHelpers
from .user import UserSummary


def _blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class AnnouncementCreate(BaseModel):
    title: str = Field(
        ..., min_length=1, max_length=AppConstants.MAX_ANNOUNCEMENT_TITLE_LENGTH
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=AppConstants.MAX_ANNOUNCEMENT_DESCRIPTION_LENGTH,
    )
    category: Optional[AnnouncementCategory] = AnnouncementCategory.GENERAL
    priority: Optional[AnnouncementPriority] = AnnouncementPriority.NORMAL
    target_block: Optional[str] = None
    expiry_date: Optional[datetime] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator(
        "category", "priority", "target_block", "expiry_date", mode="before"
    )
    @classmethod
    def empty_is_unset(cls, v):
        # Frontends send "" for untouched optional fields
        return _blank_to_none(v)

    @field_validator("expiry_date")
    @classmethod
    def normalize_expiry(cls, v):
        return DateHelpers.to_naive_utc(v)

    @field_validator("category")
    @classmethod
    def default_category(cls, v):
        return v or AnnouncementCategory.GENERAL

    @field_validator("priority")
    @classmethod
    def default_priority(cls, v):
        return v or AnnouncementPriority.NORMAL


class AnnouncementUpdate(BaseModel):
    title: Optional[str] = Field(
        None, min_length=1, max_length=AppConstants.MAX_ANNOUNCEMENT_TITLE_LENGTH
    )
    description: Optional[str] = Field(
        None,
        min_length=1,
        max_length=AppConstants.MAX_ANNOUNCEMENT_DESCRIPTION_LENGTH,
    )
    category: Optional[AnnouncementCategory] = None
    priority: Optional[AnnouncementPriority] = None
    target_block: Optional[str] = None
    expiry_date: Optional[datetime] = None
    is_active: Optional[bool] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("target_block", "expiry_date", mode="before")
    @classmethod
    def empty_is_null(cls, v):
        return _blank_to_none(v)

    @field_validator("expiry_date")
    @classmethod
    def normalize_expiry(cls, v):
        return DateHelpers.to_naive_utc(v)


class AnnouncementResponse(BaseModel):
    id: int
    title: str
    description: str
    category: AnnouncementCategory
    priority: AnnouncementPriority
    target_block: Optional[str] = None
    expiry_date: Optional[datetime] = None
    is_active: bool
    created_by: int
    author: Optional[UserSummary] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def is_expired(self) -> bool:
        """Expired once the expiry date has passed; never stored"""
        if not self.expiry_date:
            return False
        return datetime.utcnow() > self.expiry_date

    class Config:
        from_attributes = True
