class ResponseMessages:
    """Standard API response messages"""

    # Success messages
    SUCCESS = "Success"
    CREATED = "Created successfully"
    UPDATED = "Updated successfully"
    DELETED = "Deleted successfully"

    # Complaints
    COMPLAINT_CREATED = "Complaint submitted successfully"
    COMPLAINT_UPDATED = "Complaint updated successfully"

    # Announcements
    ANNOUNCEMENT_CREATED = "Announcement created successfully"
    ANNOUNCEMENT_UPDATED = "Announcement updated successfully"
    ANNOUNCEMENT_DELETED = "Announcement deleted successfully"

    # Errors
    ACCESS_DENIED = "Access denied"
    ADMIN_REQUIRED = "Admin access required"
    ROUTE_NOT_FOUND = "Route not found"


# Application Constants
class AppConstants:
    # Validation Limits
    MAX_COMPLAINT_TITLE_LENGTH = 100
    MAX_COMPLAINT_DESCRIPTION_LENGTH = 1000
    MAX_ADMIN_REMARK_LENGTH = 500
    MAX_ANNOUNCEMENT_TITLE_LENGTH = 120
    MAX_ANNOUNCEMENT_DESCRIPTION_LENGTH = 2000

    # Leaderboards
    LEADERBOARD_SIZE = 5

    # Durations
    MS_PER_HOUR = 3_600_000
    MS_PER_MINUTE = 60_000

    # Students without a block announce under this target
    DEFAULT_STUDENT_TARGET_BLOCK = "General"

    # CORS
    DEFAULT_ALLOWED_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:5175",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:5174",
    ]
