from .constants import AppConstants, ResponseMessages
from .date_helpers import DateHelpers

__all__ = [
    "AppConstants",
    "ResponseMessages",
    "DateHelpers",
]
