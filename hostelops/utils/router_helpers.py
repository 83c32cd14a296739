# hostelops/utils/router_helpers.py

from fastapi import HTTPException, status
from typing import Callable
from functools import wraps
import logging

# Import all service exceptions
from ..services.complaint_service import (
    ComplaintServiceError,
    ComplaintNotFoundError,
    ComplaintValidationError,
    PermissionDeniedError,
)
from ..services.announcement_service import (
    AnnouncementServiceError,
    AnnouncementNotFoundError,
    AnnouncementValidationError,
)
from ..services.analytics_service import AnalyticsServiceError

logger = logging.getLogger(__name__)


def handle_service_errors(func: Callable) -> Callable:
    """Decorator to standardize service error handling in routers"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        # Permission/Access Errors -> 403 Forbidden
        except PermissionDeniedError as e:
            logger.warning(f"Permission denied: {str(e)}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

        except (ComplaintNotFoundError, AnnouncementNotFoundError) as e:
            logger.warning(f"Resource not found: {str(e)}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        # Validation Errors -> 400 Bad Request
        except (ComplaintValidationError, AnnouncementValidationError, ValueError) as e:
            logger.warning(f"Validation error: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        # Persistence failures surface with their message
        except (
            ComplaintServiceError,
            AnnouncementServiceError,
            AnalyticsServiceError,
        ) as e:
            logger.error(f"Service error in {func.__name__}: {str(e)}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )

        # Unexpected errors -> 500 Internal Server Error
        except Exception as e:
            logger.error(
                f"Unexpected error in {func.__name__}: {str(e)}", exc_info=True
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )

    return wrapper
