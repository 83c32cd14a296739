from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime
import logging
import os
import uvicorn

from . import routers
from .database import init_db, check_db_connection
from .schemas.common import ResponseFactory
from .utils.constants import AppConstants, ResponseMessages

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def get_allowed_origins() -> list:
    """Development origins plus FRONTEND_URL, without trailing slashes"""
    origins = AppConstants.DEFAULT_ALLOWED_ORIGINS + [os.getenv("FRONTEND_URL")]
    normalized = []
    for origin in origins:
        if not origin:
            continue
        origin = origin.rstrip("/")
        if origin not in normalized:
            normalized.append(origin)
    return normalized


# Initialize FastAPI app
app = FastAPI(
    title="HostelOps API",
    description="Hostel complaints, announcements and maintenance analytics",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


def _error_response(
    status_code: int, message: str, headers: dict = None, details: list = None
):
    body = ResponseFactory.error(message=message, details=details).model_dump(
        mode="json", exclude_none=True
    )
    return JSONResponse(status_code=status_code, content=body, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = str(exc.detail)
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = ResponseMessages.ROUTE_NOT_FOUND
    return _error_response(exc.status_code, message, getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    details = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
        details.append({"field": field, "message": error["msg"]})
    logger.warning(f"Request validation failed: {messages}")
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "; ".join(messages), details=details
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@app.on_event("startup")
async def startup_event():
    """Create tables when the app starts"""
    logger.info("🚀 Starting HostelOps API...")
    init_db()


# Include routers
app.include_router(
    routers.complaints.router, prefix="/api/complaints", tags=["complaints"]
)
app.include_router(
    routers.announcements.router, prefix="/api/announcements", tags=["announcements"]
)
app.include_router(routers.config.router, prefix="/api/config", tags=["config"])


@app.get("/")
async def root():
    return {"success": True, "message": "Welcome to HostelOps API"}


@app.get("/api/health")
async def health_check():
    return {
        "success": True,
        "message": "HostelOps API is running",
        "timestamp": datetime.utcnow().isoformat(),
        "database": check_db_connection(),
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
