import pytest

from hostelops.models.enums import ComplaintPriority
from hostelops.services.priority_classifier import detect_priority


@pytest.mark.parametrize(
    "description",
    [
        "urgent broken pipe",
        "Water LEAK under the sink",
        "Got a shock from the switch",
        "No water since yesterday",
        "fire alarm keeps ringing, smells like fire",
        "Socket is sparking and the fan is not working",
    ],
)
def test_high_keywords_win_over_medium(description):
    assert detect_priority(description) == ComplaintPriority.HIGH


@pytest.mark.parametrize(
    "description",
    [
        "This is not working properly",
        "Window pane BROKEN",
        "Some damage to the door",
        "There is an issue with the lock",
    ],
)
def test_medium_keywords(description):
    assert detect_priority(description) == ComplaintPriority.MEDIUM


@pytest.mark.parametrize("description", ["Need new chair", "", "Please repaint"])
def test_everything_else_is_low(description):
    assert detect_priority(description) == ComplaintPriority.LOW


def test_never_returns_urgent():
    assert detect_priority("URGENT URGENT urgent") == ComplaintPriority.HIGH
