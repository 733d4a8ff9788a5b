"""Date helpers for note names and listings."""

from datetime import datetime

DEFAULT_NAME_PREFIX = "New file"
DEFAULT_NOTE_EXTENSION = ".md"


def generate_name(*, now: datetime | None = None) -> str:
    """Generate a default note file name from the local wall-clock time.

    Names are unique only to the second; callers creating several notes
    within the same second must handle collisions themselves.

    Args:
        now: Moment to use instead of reading the system clock.

    Returns:
        Name in the form ``New file YYYY-MM-DD hh:mm:ss.md``.
    """
    if now is None:
        now = datetime.now()

    stamp = (
        f"{now.year}-{now.month:02d}-{now.day:02d} "
        f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}"
    )
    return f"{DEFAULT_NAME_PREFIX} {stamp}{DEFAULT_NOTE_EXTENSION}"


def format_date(value: datetime) -> str:
    """Format a datetime as ``dd.mm.yyyy, hh:mm``.

    The datetime's own fields are used as given; no timezone conversion
    or localization takes place.

    Raises:
        TypeError: If value is not a datetime.
    """
    if not isinstance(value, datetime):
        msg = f"format_date() expects datetime, got {type(value).__name__}"
        raise TypeError(msg)

    return (
        f"{value.day:02d}.{value.month:02d}.{value.year}, "
        f"{value.hour:02d}:{value.minute:02d}"
    )


def format_timestamp(timestamp: float) -> str:
    """Format a POSIX timestamp (e.g. ``st_mtime``) in local time."""
    return format_date(datetime.fromtimestamp(timestamp))
