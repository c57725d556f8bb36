"""Human-readable durations and unit conversion for the recency filter."""

import math

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

TIME_UNITS: dict[str, int] = {
    "seconds": 1,
    "minutes": SECONDS_PER_MINUTE,
    "hours": SECONDS_PER_HOUR,
    "days": SECONDS_PER_DAY,
}


def format_time_posted(seconds: int | float) -> str:
    """Label a "posted within" value as whole days or whole hours.

    Anything that is not an exact non-zero multiple of a day or an hour
    is reported as "Any time".
    """
    days = seconds / SECONDS_PER_DAY
    hours = seconds / SECONDS_PER_HOUR

    if days >= 1 and days == math.floor(days):
        return "1 day" if days == 1 else f"{int(days)} days"
    if hours >= 1 and hours == math.floor(hours):
        return "1 hour" if hours == 1 else f"{int(hours)} hours"
    return "Any time"


def format_seconds(seconds: int | float) -> str:
    """Spell out a duration, e.g. 3661 -> "1 hour, 1 minute, 1 second".

    Zero components are skipped. Fractional input is floored.
    """
    total = math.floor(seconds) if seconds > 0 else 0

    days, rest = divmod(total, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, secs = divmod(rest, SECONDS_PER_MINUTE)

    parts = [
        _plural(amount, unit)
        for amount, unit in ((days, "day"), (hours, "hour"), (minutes, "minute"), (secs, "second"))
        if amount > 0
    ]
    return ", ".join(parts) or "0 seconds"


def to_seconds(value: int | float, unit: str) -> int:
    """Convert a custom amount in ``unit`` to whole seconds (5 hours -> 18000).

    Raises:
        ValueError: If the unit is unknown or the amount is not finite.
    """
    key = unit.lower().strip()
    if key not in TIME_UNITS:
        valid = ", ".join(TIME_UNITS)
        msg = f"Unknown time unit '{unit}'. Available: {valid}"
        raise ValueError(msg)
    total = value * TIME_UNITS[key]
    if isinstance(total, float) and not math.isfinite(total):
        msg = f"Time value must be a finite number, got {value}"
        raise ValueError(msg)
    return math.floor(total)


def _plural(amount: int, unit: str) -> str:
    return f"{amount} {unit}{'s' if amount > 1 else ''}"
