from .announcement_service import AnnouncementService
from .analytics_service import AnalyticsService
from .complaint_service import ComplaintService
from .priority_classifier import detect_priority

__all__ = [
    "AnnouncementService",
    "AnalyticsService",
    "ComplaintService",
    "detect_priority",
]
