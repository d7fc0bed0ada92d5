"""Calendar helpers for rendering UNIX timestamps."""

SECONDS_PER_DAY = 86_400

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEAP_MONTH_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def unix_timestamp_to_date(timestamp: int) -> tuple[int, int, int]:
    """Convert a UNIX timestamp (UTC seconds) to ``(year, month, day)``."""
    remaining = timestamp // SECONDS_PER_DAY
    year = 1970
    while True:
        year_days = 366 if is_leap_year(year) else 365
        if remaining < year_days:
            break
        remaining -= year_days
        year += 1

    month = 1
    for days_in_month in _LEAP_MONTH_DAYS if is_leap_year(year) else _MONTH_DAYS:
        if remaining < days_in_month:
            break
        remaining -= days_in_month
        month += 1

    return year, month, remaining + 1


def format_datetime(timestamp: int) -> str:
    """Render a UNIX timestamp as ``DD-MM-YYYY HH:MM:SS`` in UTC.

    Raises ValueError for times before the epoch.
    """
    timestamp = int(timestamp)
    if timestamp < 0:
        raise ValueError("Invalid time")
    year, month, day = unix_timestamp_to_date(timestamp)
    seconds_in_day = timestamp % SECONDS_PER_DAY
    hour, rest = divmod(seconds_in_day, 3600)
    minute, second = divmod(rest, 60)
    return f"{day:02}-{month:02}-{year:04} {hour:02}:{minute:02}:{second:02}"