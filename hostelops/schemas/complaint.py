from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from ..models.enums import ComplaintCategory, ComplaintPriority, ComplaintStatus
from ..utils.constants import AppConstants
from .user import UserSummary


class ComplaintCreate(BaseModel):
    title: str = Field(
        ..., min_length=1, max_length=AppConstants.MAX_COMPLAINT_TITLE_LENGTH
    )
    description: str = Field(
        ..., min_length=1, max_length=AppConstants.MAX_COMPLAINT_DESCRIPTION_LENGTH
    )
    category: ComplaintCategory

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        # Trim before length checks, so whitespace-only values are rejected
        return v.strip() if isinstance(v, str) else v


class ComplaintAdminUpdate(BaseModel):
    """Fields an administrator may change; absent fields are left untouched"""

    status: Optional[ComplaintStatus] = None
    priority: Optional[ComplaintPriority] = None
    admin_remark: Optional[str] = Field(
        None, max_length=AppConstants.MAX_ADMIN_REMARK_LENGTH
    )

    @field_validator("admin_remark", mode="before")
    @classmethod
    def strip_remark(cls, v):
        return v.strip() if isinstance(v, str) else v


class ComplaintFilter(BaseModel):
    category: Optional[ComplaintCategory] = None
    status: Optional[ComplaintStatus] = None
    priority: Optional[ComplaintPriority] = None


class ComplaintResponse(BaseModel):
    id: int
    title: str
    description: str
    category: ComplaintCategory
    priority: ComplaintPriority
    status: ComplaintStatus
    admin_remark: Optional[str] = None
    room_number: Optional[str] = None
    hostel_block: Optional[str] = None
    student_id: int
    student: Optional[UserSummary] = None
    assigned_staff_id: Optional[int] = None
    assigned_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
