"""Due-date helpers for scheduled register items."""

from datetime import date
from typing import Optional

DUE_OVERDUE = "overdue"
DUE_SOON = "due_soon"
DUE_UPCOMING = "upcoming"
DUE_OK = "ok"

DUE_SOON_DAYS = 30
DUE_UPCOMING_DAYS = 60


def days_until(due: date, today: Optional[date] = None) -> int:
    return (due - (today or date.today())).days


def due_status(due: Optional[date], today: Optional[date] = None) -> Optional[str]:
    """Bucket a due date into overdue / due_soon / upcoming / ok."""
    if due is None:
        return None
    remaining = days_until(due, today)
    if remaining < 0:
        return DUE_OVERDUE
    if remaining < DUE_SOON_DAYS:
        return DUE_SOON
    if remaining < DUE_UPCOMING_DAYS:
        return DUE_UPCOMING
    return DUE_OK
