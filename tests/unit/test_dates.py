from datetime import date, timedelta

from ims.utils.dates import days_until, due_status

TODAY = date(2025, 6, 1)


def test_days_until():
    assert days_until(TODAY + timedelta(days=3), TODAY) == 3
    assert days_until(TODAY - timedelta(days=1), TODAY) == -1


def test_due_status_buckets():
    assert due_status(None, TODAY) is None
    assert due_status(TODAY - timedelta(days=1), TODAY) == "overdue"
    assert due_status(TODAY, TODAY) == "due_soon"
    assert due_status(TODAY + timedelta(days=29), TODAY) == "due_soon"
    assert due_status(TODAY + timedelta(days=30), TODAY) == "upcoming"
    assert due_status(TODAY + timedelta(days=59), TODAY) == "upcoming"
    assert due_status(TODAY + timedelta(days=60), TODAY) == "ok"
