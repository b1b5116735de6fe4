"""Priority tiers derived from the gap between due and submission dates."""
import math
from datetime import datetime, timedelta

from .models import Priority

ONE_DAY = timedelta(days=1)

# First matching (threshold in days, tier) wins; None matches everything
PRIORITY_LEVELS = [
    (1, Priority.High),
    (3, Priority.Medium),
    (None, Priority.Low),
]


def day_diff(due_date: datetime, sub_date: datetime) -> int:
    """Whole days between submission and due date, floored."""
    return math.floor((due_date - sub_date) / ONE_DAY)


def classify(due_date: datetime, sub_date: datetime) -> Priority:
    """Return the priority tier for homework due at ``due_date`` and
    submitted at ``sub_date``.

    Submissions planned after the due date are overdue and always Low.
    """
    if sub_date > due_date:
        return Priority.Low

    diff = day_diff(due_date, sub_date)
    for threshold, tier in PRIORITY_LEVELS:
        if threshold is None or diff <= threshold:
            return tier
    return Priority.Low
