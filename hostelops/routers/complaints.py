from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
from ..database import get_db
from ..dependencies.permissions import get_current_user, require_admin
from ..models.enums import ComplaintCategory, ComplaintPriority, ComplaintStatus
from ..models.user import User
from ..schemas.analytics import ComplaintStats, Leaderboard
from ..schemas.common import ListResponse, ResponseFactory, SuccessResponse
from ..schemas.complaint import (
    ComplaintAdminUpdate,
    ComplaintCreate,
    ComplaintFilter,
    ComplaintResponse,
)
from ..services.analytics_service import AnalyticsService
from ..services.complaint_service import ComplaintService
from ..utils.constants import ResponseMessages
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["complaints"])


@router.post(
    "",
    response_model=SuccessResponse[ComplaintResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_complaint(
    complaint_data: ComplaintCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Submit a new complaint; priority is detected from the description"""
    complaint = ComplaintService(db).create_complaint(current_user, complaint_data)

    return ResponseFactory.created(
        data=ComplaintResponse.model_validate(complaint),
        message=ResponseMessages.COMPLAINT_CREATED,
    )


@router.get("/my", response_model=ListResponse[ComplaintResponse])
@handle_service_errors
async def get_my_complaints(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Complaints filed by the caller, newest first"""
    complaints = ComplaintService(db).list_for_student(current_user)

    return ResponseFactory.listed(
        data=[ComplaintResponse.model_validate(c) for c in complaints]
    )


@router.get("/stats", response_model=SuccessResponse[ComplaintStats])
@handle_service_errors
async def get_complaint_stats(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Complaint counts by status, category and priority (admin only)"""
    stats = AnalyticsService(db).get_complaint_stats()
    return ResponseFactory.success(data=ComplaintStats(**stats))


@router.get("/leaderboard", response_model=SuccessResponse[Leaderboard])
@handle_service_errors
async def get_leaderboard(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Fastest staff and quietest blocks (admin only)"""
    leaderboard = AnalyticsService(db).get_leaderboard()
    return ResponseFactory.success(data=Leaderboard(**leaderboard))


@router.get("", response_model=ListResponse[ComplaintResponse])
@handle_service_errors
async def get_all_complaints(
    category: Optional[ComplaintCategory] = Query(None, description="Filter by category"),
    complaint_status: Optional[ComplaintStatus] = Query(
        None, alias="status", description="Filter by status"
    ),
    priority: Optional[ComplaintPriority] = Query(None, description="Filter by priority"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """All complaints with optional exact-match filters (admin only)"""
    filters = ComplaintFilter(
        category=category, status=complaint_status, priority=priority
    )
    complaints = ComplaintService(db).list_all(filters)

    return ResponseFactory.listed(
        data=[ComplaintResponse.model_validate(c) for c in complaints]
    )


@router.get("/{complaint_id}", response_model=SuccessResponse[ComplaintResponse])
@handle_service_errors
async def get_complaint(
    complaint_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Single complaint; students can only view their own"""
    complaint = ComplaintService(db).get_visible_to(current_user, complaint_id)
    return ResponseFactory.success(data=ComplaintResponse.model_validate(complaint))


@router.put("/{complaint_id}", response_model=SuccessResponse[ComplaintResponse])
@handle_service_errors
async def update_complaint(
    complaint_id: int,
    updates: ComplaintAdminUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Update status, priority and remark (admin only)"""
    complaint = ComplaintService(db).update_by_admin(complaint_id, updates, admin)

    return ResponseFactory.success(
        data=ComplaintResponse.model_validate(complaint),
        message=ResponseMessages.COMPLAINT_UPDATED,
    )
