from pydantic import BaseModel
from typing import Optional


class UserSummary(BaseModel):
    """Public user reference embedded in complaints and announcements"""

    id: int
    name: str
    email: str
    role: str
    room_number: Optional[str] = None
    hostel_block: Optional[str] = None

    class Config:
        from_attributes = True
