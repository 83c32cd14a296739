from fastapi import APIRouter
from ..models.enums import (
    AnnouncementCategory,
    AnnouncementPriority,
    ComplaintCategory,
    ComplaintPriority,
    ComplaintStatus,
)
from .base import ConfigRouter

complaint_config = ConfigRouter("Complaints")
complaint_config.add_enum_endpoint(
    ComplaintCategory, "categories", "Complaint Categories"
)
complaint_config.add_enum_endpoint(
    ComplaintStatus,
    "statuses",
    "Complaint Statuses",
    description_map={
        ComplaintStatus.PENDING.value: "Filed, not yet picked up",
        ComplaintStatus.IN_PROGRESS.value: "Assigned to staff and being worked on",
        ComplaintStatus.RESOLVED.value: "Fixed",
        ComplaintStatus.REJECTED.value: "Closed without action",
    },
)
complaint_config.add_enum_endpoint(
    ComplaintPriority,
    "priorities",
    "Complaint Priorities",
    description_map={
        ComplaintPriority.URGENT.value: "Set by administrators only",
    },
)

announcement_config = ConfigRouter("Announcements")
announcement_config.add_enum_endpoint(
    AnnouncementCategory, "categories", "Announcement Categories"
)
announcement_config.add_enum_endpoint(
    AnnouncementPriority, "priorities", "Announcement Priorities"
)

router = APIRouter()
router.include_router(complaint_config.router)
router.include_router(announcement_config.router)
