"""Time-zone aware wall-clock helpers.

The globe clock shows "now" in a user-selected IANA zone while the sun
calculation always runs on the absolute UTC instant. These helpers convert
between the two views.
"""
import warnings
from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones


# Common zones used when the platform database cannot be enumerated
FALLBACK_TIME_ZONES = [
    'UTC', 'Europe/London', 'Europe/Paris', 'Europe/Moscow', 'Africa/Cairo',
    'Asia/Dubai', 'Asia/Tehran', 'Asia/Karachi', 'Asia/Kolkata', 'Asia/Bangkok',
    'Asia/Shanghai', 'Asia/Tokyo', 'Australia/Sydney', 'Pacific/Auckland',
    'America/Sao_Paulo', 'America/New_York', 'America/Chicago', 'America/Denver',
    'America/Los_Angeles',
]

TimeZoneLike = Union[str, tzinfo]


class UnknownTimeZoneError(ValueError):
    """Raised when a time zone name cannot be resolved."""


def to_iso_local(dt: datetime) -> str:
    """Format a datetime's own fields as YYYY-MM-DDTHH:MM:SS."""
    return dt.strftime('%Y-%m-%dT%H:%M:%S')


def list_iana_time_zones() -> List[str]:
    """List IANA time zone names known to the platform.

    Returns:
        Sorted zone names, or FALLBACK_TIME_ZONES if the database is empty
    """
    try:
        zones = available_timezones()
    except (OSError, ValueError) as e:
        warnings.warn(f"Time zone database unavailable ({e}); using built-in list")
        return list(FALLBACK_TIME_ZONES)
    if not zones:
        warnings.warn("Time zone database is empty; using built-in list")
        return list(FALLBACK_TIME_ZONES)
    return sorted(zones)


def resolve_time_zone(tz: TimeZoneLike) -> tzinfo:
    """Resolve a zone name (or pass through a tzinfo).

    Raises:
        UnknownTimeZoneError: If the name is not a known IANA zone
    """
    if isinstance(tz, tzinfo):
        return tz
    if tz in ('UTC', 'Z'):
        return timezone.utc
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownTimeZoneError(f"Unknown time zone: {tz!r}") from e


def as_utc(instant: datetime) -> datetime:
    """Return an aware UTC datetime; naive datetimes are taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def wall_clock_parts(instant: datetime, tz: TimeZoneLike) -> Dict[str, int]:
    """Break an instant into the wall-clock fields seen in a zone.

    Args:
        instant: Absolute time (naive values are UTC)
        tz: Zone name or tzinfo

    Returns:
        Dict with year, month, day, hour, minute, second
    """
    local = as_utc(instant).astimezone(resolve_time_zone(tz))
    return {
        'year': local.year,
        'month': local.month,
        'day': local.day,
        'hour': local.hour,
        'minute': local.minute,
        'second': local.second,
    }


def date_with_time_zone(instant: datetime, tz: TimeZoneLike) -> datetime:
    """Rebuild the zone's wall-clock reading as a UTC datetime.

    The returned value carries the literal fields of the wall clock in `tz`
    labelled as UTC. It is not the same absolute instant unless `tz` is UTC.
    """
    p = wall_clock_parts(instant, tz)
    return datetime(p['year'], p['month'], p['day'],
                    p['hour'], p['minute'], p['second'], tzinfo=timezone.utc)


def to_iso_in_time_zone(instant: datetime, tz: TimeZoneLike) -> str:
    """Format an instant as YYYY-MM-DDTHH:MM:SS in a zone.

    Falls back to the instant's own fields if the zone cannot be resolved.
    """
    try:
        p = wall_clock_parts(instant, tz)
    except UnknownTimeZoneError as e:
        warnings.warn(f"{e}; formatting without time zone")
        return to_iso_local(instant)
    return (f"{p['year']:04d}-{p['month']:02d}-{p['day']:02d}"
            f"T{p['hour']:02d}:{p['minute']:02d}:{p['second']:02d}")


def format_time_in_time_zone(instant: datetime, tz: TimeZoneLike) -> str:
    """Format an instant as HH:MM:SS in a zone, falling back like above."""
    try:
        p = wall_clock_parts(instant, tz)
    except UnknownTimeZoneError as e:
        warnings.warn(f"{e}; formatting without time zone")
        return instant.strftime('%H:%M:%S')
    return f"{p['hour']:02d}:{p['minute']:02d}:{p['second']:02d}"


def utc_offset_hours(instant: datetime, tz: TimeZoneLike) -> float:
    """UTC offset of a zone at the given instant, in hours."""
    local = as_utc(instant).astimezone(resolve_time_zone(tz))
    offset = local.utcoffset()
    return offset.total_seconds() / 3600 if offset is not None else 0.0


def describe_offset_difference(hours: float) -> str:
    """Describe how far a remote clock is from the local one.

    Args:
        hours: Remote offset minus local offset

    Returns:
        'same', 'ahead N h' or 'behind N h'
    """
    if abs(hours) < 1e-6:
        return 'same'
    amount = abs(hours)
    text = f"{int(amount)}" if amount == int(amount) else f"{amount:g}"
    return f"ahead {text} h" if hours > 0 else f"behind {text} h"


def parse_instant(value: Optional[str], tz: Optional[TimeZoneLike] = None) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Args:
        value: ISO text, or None / 'now' for the current time
        tz: Zone applied to naive timestamps (default UTC)

    Returns:
        Aware UTC datetime

    Raises:
        ValueError: If the timestamp cannot be parsed
    """
    if value is None or value.lower() == 'now':
        return datetime.now(timezone.utc)
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=resolve_time_zone(tz) if tz else timezone.utc)
    return dt.astimezone(timezone.utc)
