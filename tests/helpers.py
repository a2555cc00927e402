"""Small helpers shared by the test modules."""

from datetime import timedelta

from django.utils import timezone

PASSWORD = 'Camp-Desk-2024!'


def years_ago(years, today=None):
    today = today or timezone.localdate()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return today.replace(year=today.year - years, day=28)


def day(offset):
    """ISO date *offset* days from today, for JSON payloads."""
    return (timezone.localdate() + timedelta(days=offset)).isoformat()
