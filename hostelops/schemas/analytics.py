from pydantic import BaseModel
from typing import List


class CategoryCount(BaseModel):
    category: str
    count: int


class PriorityCount(BaseModel):
    priority: str
    count: int


class ComplaintStats(BaseModel):
    total: int
    pending: int
    in_progress: int
    resolved: int
    rejected: int
    by_category: List[CategoryCount]
    by_priority: List[PriorityCount]


class StaffLeaderboardEntry(BaseModel):
    staff_id: int
    name: str
    avg_time_ms: float
    avg_time: str
    total_resolved: int


class BlockLeaderboardEntry(BaseModel):
    block: str
    total_complaints: int
    resolved_count: int


class Leaderboard(BaseModel):
    staff_leaderboard: List[StaffLeaderboardEntry]
    block_leaderboard: List[BlockLeaderboardEntry]
