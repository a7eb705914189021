"""
Low-precision solar ephemeris.

Implements the NOAA simplified solar position series (good to about 0.01
degrees, which is far more than a day/night terminator needs) plus the
simple declination/hour-angle model used for local sun studies.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from ..utils.geo_utils import Vec3, lat_lon_to_vec3, normalize_longitude
from ..utils.time_utils import as_utc


# Julian day of the Unix epoch and of J2000.0
UNIX_EPOCH_JD = 2440587.5
J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0
MS_PER_DAY = 86400000.0

# Days per month for the sun-study model (non-leap year)
DAYS_IN_MONTH = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


@dataclass
class SolarCoordinates:
    """Intermediate quantities of the solar series, all in degrees."""

    julian_day: float
    mean_longitude: float
    mean_anomaly: float
    equation_of_center: float
    true_longitude: float
    obliquity: float


@dataclass
class SunPosition:
    """Local horizontal sun position in degrees."""

    azimuth: float
    altitude: float


@dataclass
class SunLight:
    """Directional/ambient light settings for a sun altitude."""

    intensity: float
    ambient: float
    color: int


def julian_day(instant: datetime) -> float:
    """
    Julian day for an instant.

    Args:
        instant: Absolute time (naive values are UTC)

    Returns:
        Julian day number including the day fraction
    """
    ms = as_utc(instant).timestamp() * 1000.0
    return ms / MS_PER_DAY + UNIX_EPOCH_JD


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_CENTURY


def solar_coordinates(instant: datetime) -> SolarCoordinates:
    """
    Evaluate the truncated solar series for an instant.

    Args:
        instant: Absolute time (naive values are UTC)

    Returns:
        SolarCoordinates with mean/true longitude, anomaly and obliquity
    """
    jd = julian_day(instant)
    t = julian_century(jd)

    l0 = (280.46646 + 36000.76983 * t + 0.0003032 * t * t) % 360
    m = 357.52911 + 35999.05029 * t - 0.0001537 * t * t
    m_rad = math.radians(m)

    # Equation of center
    c = ((1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(m_rad)
         + (0.019993 - 0.000101 * t) * math.sin(2 * m_rad)
         + 0.000289 * math.sin(3 * m_rad))

    epsilon = 23.439291 - 0.0130042 * t

    return SolarCoordinates(
        julian_day=jd,
        mean_longitude=l0,
        mean_anomaly=m,
        equation_of_center=c,
        true_longitude=l0 + c,
        obliquity=epsilon,
    )


def sun_direction_eci(instant: datetime) -> Vec3:
    """
    Direction to the sun in Earth-centred equatorial coordinates.

    x points at the vernal equinox and z at the north celestial pole.

    Args:
        instant: Absolute time (naive values are UTC)

    Returns:
        Unit vector (x, y, z)
    """
    sc = solar_coordinates(instant)
    lam = math.radians(sc.true_longitude)
    eps = math.radians(sc.obliquity)
    return (
        math.cos(lam),
        math.cos(eps) * math.sin(lam),
        math.sin(eps) * math.sin(lam),
    )


def declination(instant: datetime) -> float:
    """Solar declination in degrees."""
    z = sun_direction_eci(instant)[2]
    return math.degrees(math.asin(max(-1.0, min(1.0, z))))


def right_ascension(instant: datetime) -> float:
    """Solar right ascension in degrees, [0, 360)."""
    x, y, _ = sun_direction_eci(instant)
    return math.degrees(math.atan2(y, x)) % 360


def greenwich_mean_sidereal_time(instant: datetime) -> float:
    """Greenwich mean sidereal time in degrees, [0, 360)."""
    jd = julian_day(instant)
    t = julian_century(jd)
    gmst = (280.46061837 + 360.98564736629 * (jd - J2000_JD)
            + 0.000387933 * t * t - t * t * t / 38710000.0)
    return gmst % 360


def subsolar_point(instant: datetime) -> Tuple[float, float]:
    """
    Geographic point where the sun is at the zenith.

    Args:
        instant: Absolute time (naive values are UTC)

    Returns:
        Tuple of (lat, lon) in degrees, lon in [-180, 180)
    """
    lat = declination(instant)
    lon = normalize_longitude(right_ascension(instant) - greenwich_mean_sidereal_time(instant))
    return lat, lon


def sun_direction_scene(instant: datetime) -> Vec3:
    """
    Sun direction in the globe's y-up frame (see lat_lon_to_vec3).

    Points from the Earth's centre towards the subsolar point, so
    surface normals can be dotted against it directly.
    """
    lat, lon = subsolar_point(instant)
    return lat_lon_to_vec3(lat, lon, 1.0)


def day_of_year(month: int, day: int) -> int:
    """Day of a non-leap year for a month/day pair.

    February 29 is accepted and counts as day 60.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be 1-12, got {month}")
    last = 29 if month == 2 else DAYS_IN_MONTH[month]
    if not 1 <= day <= last:
        raise ValueError(f"Day must be 1-{last} for month {month}, got {day}")
    return sum(DAYS_IN_MONTH[1:month]) + day


def solar_position(hour: float, month: int, day: int, latitude: float) -> SunPosition:
    """
    Approximate local sun position for a sun study.

    Uses a sinusoidal declination and solar time (hour angle 15 degrees per
    hour from noon); longitude and equation of time are ignored.

    Args:
        hour: Local solar hour (0-24, fractional)
        month: Month (1-12)
        day: Day of month (1-31)
        latitude: Observer latitude in degrees

    Returns:
        SunPosition with azimuth (degrees from north, clockwise) and altitude
    """
    doy = day_of_year(month, day)

    decl = 23.45 * math.sin(2 * math.pi * (284 + doy) / 365)
    dec_rad = math.radians(decl)
    lat_rad = math.radians(latitude)
    hour_rad = math.radians((hour - 12) * 15)

    sin_alt = (math.sin(lat_rad) * math.sin(dec_rad) +
               math.cos(lat_rad) * math.cos(dec_rad) * math.cos(hour_rad))
    sin_alt = max(-1.0, min(1.0, sin_alt))
    altitude = math.degrees(math.asin(sin_alt))

    denom = math.cos(lat_rad) * math.cos(math.asin(sin_alt))
    if abs(denom) < 1e-12:
        # Pole or zenith: azimuth is undefined
        azimuth = 180.0
    else:
        cos_az = (math.sin(dec_rad) - math.sin(lat_rad) * sin_alt) / denom
        azimuth = math.degrees(math.acos(max(-1.0, min(1.0, cos_az))))
    if hour > 12:
        azimuth = 360 - azimuth

    return SunPosition(azimuth=azimuth, altitude=altitude)


def sun_light_state(altitude: float) -> SunLight:
    """
    Light settings for a sun altitude: night, golden hour or day.

    Args:
        altitude: Sun altitude in degrees

    Returns:
        SunLight with directional intensity, ambient intensity and color
    """
    if altitude < 0:
        return SunLight(intensity=0.0, ambient=0.1, color=0xfff5e6)
    if altitude < 10:
        return SunLight(intensity=altitude / 10 * 1.5, ambient=0.15, color=0xff8844)
    return SunLight(intensity=2.0, ambient=0.2, color=0xfff5e6)


def sun_light_position(position: SunPosition, distance: float) -> Vec3:
    """
    Place a directional light for a local sun position.

    Altitude is clamped at the horizon so the light never goes underground.
    """
    az = math.radians(position.azimuth)
    alt = math.radians(max(0.0, position.altitude))
    return (
        distance * math.sin(az) * math.cos(alt),
        distance * math.sin(alt),
        distance * math.cos(az) * math.cos(alt),
    )
