from datetime import datetime
from typing import Any, Dict, Generic, List, Optional
from ..utils.constants import ResponseMessages
from pydantic import BaseModel, Field
from typing import TypeVar

T = TypeVar("T")


class BaseResponse(BaseModel, Generic[T]):
    """Base response model for all API responses"""

    success: bool = True
    message: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    data: Optional[T] = None


class SuccessResponse(BaseResponse[T], Generic[T]):
    """Standard success response with typed data"""

    success: bool = True


class ListResponse(BaseResponse[List[T]], Generic[T]):
    """List response carrying the number of returned items"""

    count: int = 0


class ErrorResponse(BaseModel):
    """Standard error response"""

    success: bool = False
    message: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    details: Optional[List[Dict[str, Any]]] = None


class ConfigOption(BaseModel):
    """Single configuration option (for dropdowns, enums, etc.)"""

    value: str = Field(..., description="The actual value to use in API calls")
    label: str = Field(..., description="Human-readable display name")
    description: Optional[str] = Field(
        None, description="Optional description of the option"
    )


class ConfigResponse(BaseModel):
    """Standard response for configuration endpoints"""

    options: List[ConfigOption] = Field(..., description="List of available options")
    total_count: int = Field(..., description="Total number of options")
    category: Optional[str] = Field(None, description="Category name for these options")


class ResponseFactory:
    """Factory for creating consistent API responses"""

    @staticmethod
    def success(
        data: T = None, message: str = ResponseMessages.SUCCESS
    ) -> SuccessResponse[T]:
        return SuccessResponse(data=data, message=message)

    @staticmethod
    def created(
        data: T = None, message: str = ResponseMessages.CREATED
    ) -> SuccessResponse[T]:
        return SuccessResponse(data=data, message=message)

    @staticmethod
    def listed(
        data: List[T], message: str = ResponseMessages.SUCCESS
    ) -> ListResponse[T]:
        return ListResponse(data=data, count=len(data), message=message)

    @staticmethod
    def error(
        message: str, details: List[Dict[str, Any]] = None
    ) -> ErrorResponse:
        return ErrorResponse(message=message, details=details)
