"""Keyword-based severity detection for newly filed complaints."""

from ..models.enums import ComplaintPriority

# Tiers are checked in order; the first tier with a matching keyword wins
HIGH_PRIORITY_KEYWORDS = (
    "urgent",
    "leak",
    "shock",
    "no water",
    "electric shock",
    "fire",
    "sparking",
)
MEDIUM_PRIORITY_KEYWORDS = ("not working", "broken", "damage", "issue")


def detect_priority(description: str) -> ComplaintPriority:
    """
    Classify a complaint description as High, Medium or Low.

    Matching is a case-insensitive substring search. Urgent is never
    returned; it is reserved for explicit administrative overrides.
    """
    text = (description or "").lower()

    if any(keyword in text for keyword in HIGH_PRIORITY_KEYWORDS):
        return ComplaintPriority.HIGH
    if any(keyword in text for keyword in MEDIUM_PRIORITY_KEYWORDS):
        return ComplaintPriority.MEDIUM
    return ComplaintPriority.LOW
