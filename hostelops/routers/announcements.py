from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..dependencies.permissions import get_current_user, require_admin
from ..models.user import User
from ..schemas.announcement import (
    AnnouncementCreate,
    AnnouncementResponse,
    AnnouncementUpdate,
)
from ..schemas.common import ListResponse, ResponseFactory, SuccessResponse
from ..services.announcement_service import AnnouncementService
from ..utils.constants import ResponseMessages
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["announcements"])


@router.get("", response_model=ListResponse[AnnouncementResponse])
@handle_service_errors
async def get_announcements(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Active, non-expired announcements; students see their block and global ones"""
    announcements = AnnouncementService(db).list_visible(current_user)

    return ResponseFactory.listed(
        data=[AnnouncementResponse.model_validate(a) for a in announcements]
    )


@router.get("/all", response_model=ListResponse[AnnouncementResponse])
@handle_service_errors
async def get_all_announcements(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Every announcement including expired and inactive (admin only)"""
    announcements = AnnouncementService(db).list_all_including_expired_and_inactive()

    return ResponseFactory.listed(
        data=[AnnouncementResponse.model_validate(a) for a in announcements]
    )


@router.post(
    "",
    response_model=SuccessResponse[AnnouncementResponse],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_announcement(
    announcement_data: AnnouncementCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    announcement = AnnouncementService(db).create_announcement(
        current_user, announcement_data
    )

    return ResponseFactory.created(
        data=AnnouncementResponse.model_validate(announcement),
        message=ResponseMessages.ANNOUNCEMENT_CREATED,
    )


@router.get("/{announcement_id}", response_model=SuccessResponse[AnnouncementResponse])
@handle_service_errors
async def get_announcement(
    announcement_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    announcement = AnnouncementService(db).get_announcement(announcement_id)
    return ResponseFactory.success(
        data=AnnouncementResponse.model_validate(announcement)
    )


@router.put("/{announcement_id}", response_model=SuccessResponse[AnnouncementResponse])
@handle_service_errors
async def update_announcement(
    announcement_id: int,
    announcement_updates: AnnouncementUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    announcement = AnnouncementService(db).update_announcement(
        announcement_id, announcement_updates
    )

    return ResponseFactory.success(
        data=AnnouncementResponse.model_validate(announcement),
        message=ResponseMessages.ANNOUNCEMENT_UPDATED,
    )


@router.delete("/{announcement_id}", response_model=SuccessResponse[None])
@handle_service_errors
async def delete_announcement(
    announcement_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    AnnouncementService(db).delete_announcement(announcement_id)
    return ResponseFactory.success(message=ResponseMessages.ANNOUNCEMENT_DELETED)
