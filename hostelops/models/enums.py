from enum import Enum


class UserRole(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"


class ComplaintCategory(str, Enum):
    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    FURNITURE = "Furniture"
    CLEANING = "Cleaning"
    INTERNET_WIFI = "Internet/WiFi"
    PEST_CONTROL = "Pest Control"
    SECURITY = "Security"
    OTHER = "Other"


class ComplaintPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class ComplaintStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    REJECTED = "Rejected"


class AnnouncementCategory(str, Enum):
    WATER = "Water"
    ELECTRICITY = "Electricity"
    MESS = "Mess"
    INSPECTION = "Inspection"
    GENERAL = "General"


class AnnouncementPriority(str, Enum):
    NORMAL = "Normal"
    IMPORTANT = "Important"
    URGENT = "Urgent"
