from .user import UserSummary
from .complaint import (
    ComplaintCreate,
    ComplaintAdminUpdate,
    ComplaintFilter,
    ComplaintResponse,
)
from .announcement import (
    AnnouncementCreate,
    AnnouncementUpdate,
    AnnouncementResponse,
)
from .analytics import (
    CategoryCount,
    PriorityCount,
    ComplaintStats,
    StaffLeaderboardEntry,
    BlockLeaderboardEntry,
    Leaderboard,
)
from .common import (
    SuccessResponse,
    ListResponse,
    ErrorResponse,
    ConfigOption,
    ConfigResponse,
    ResponseFactory,
)

__all__ = [
    "UserSummary",
    "ComplaintCreate",
    "ComplaintAdminUpdate",
    "ComplaintFilter",
    "ComplaintResponse",
    "AnnouncementCreate",
    "AnnouncementUpdate",
    "AnnouncementResponse",
    "CategoryCount",
    "PriorityCount",
    "ComplaintStats",
    "StaffLeaderboardEntry",
    "BlockLeaderboardEntry",
    "Leaderboard",
    "SuccessResponse",
    "ListResponse",
    "ErrorResponse",
    "ConfigOption",
    "ConfigResponse",
    "ResponseFactory",
]
