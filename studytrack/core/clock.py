"""Date arithmetic helpers shared by derivation and analytics.

All functions are pure. Anything that depends on the current instant accepts an
optional ``now`` so callers can pin the clock; when omitted the current UTC time
is used. Naive datetimes are interpreted as UTC.

The second half of the module holds display helpers (``countdown``,
``format_date``, ``format_datetime``, ``is_today``, ``add_days``) for
presentation code rendering deadlines; the derivation and aggregation layers
only use the arithmetic above them.
"""

from datetime import UTC, datetime, timedelta


SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_aware(moment: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware datetimes pass through unchanged."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def _resolve_now(now: datetime | None) -> datetime:
    return ensure_aware(now) if now is not None else utc_now()


def seconds_until(moment: datetime, *, now: datetime | None = None) -> float:
    """Signed number of seconds from ``now`` until ``moment`` (negative if past)."""
    return (ensure_aware(moment) - _resolve_now(now)).total_seconds()


def hours_until(moment: datetime, *, now: datetime | None = None) -> float:
    """Signed fractional hours until ``moment``."""
    return seconds_until(moment, now=now) / SECONDS_PER_HOUR


def days_until(moment: datetime, *, now: datetime | None = None) -> float:
    """Signed fractional days until ``moment``."""
    return seconds_until(moment, now=now) / SECONDS_PER_DAY


def is_past(moment: datetime, *, now: datetime | None = None) -> bool:
    """Return True if ``moment`` is strictly before ``now``."""
    return ensure_aware(moment) < _resolve_now(now)


def add_days(moment: datetime, days: float) -> datetime:
    """Shift ``moment`` by a (possibly fractional) number of days."""
    return ensure_aware(moment) + timedelta(days=days)


def day_of_week(moment: datetime) -> str:
    """Return the English weekday name (Monday..Sunday) of ``moment``."""
    return WEEKDAY_NAMES[moment.weekday()]


def is_today(moment: datetime, *, now: datetime | None = None) -> bool:
    """Return True if ``moment`` falls on the same calendar date as ``now``."""
    current = _resolve_now(now)
    return ensure_aware(moment).astimezone(current.tzinfo).date() == current.date()


def countdown(moment: datetime, *, now: datetime | None = None) -> str:
    """Render the time left until ``moment`` as "2d 5h", "5h 12m", "12m" or "Overdue"."""
    remaining = seconds_until(moment, now=now)
    if remaining < 0:
        return "Overdue"

    days = int(remaining // SECONDS_PER_DAY)
    hours = int((remaining % SECONDS_PER_DAY) // SECONDS_PER_HOUR)
    minutes = int((remaining % SECONDS_PER_HOUR) // 60)

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_date(moment: datetime) -> str:
    """Format as "Jan 5, 2026"."""
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_datetime(moment: datetime) -> str:
    """Format as "Jan 5, 2026, 02:30 PM"."""
    return f"{format_date(moment)}, {moment:%I:%M %p}"
