from .user import User
from .complaint import Complaint
from .announcement import Announcement


__all__ = [
    "User",
    "Complaint",
    "Announcement",
]
