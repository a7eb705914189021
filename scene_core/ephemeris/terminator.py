"""Day/night terminator geometry."""
import math
from datetime import datetime
from typing import List, Tuple

from .sun import subsolar_point, sun_direction_scene
from ..utils.geo_utils import lat_lon_to_vec3, vec3_dot
from ..utils.math_utils import smoothstep_edges

# Width of the twilight band in n.l units (matches the globe shader)
TWILIGHT_EDGE = 0.2


def terminator_points(instant: datetime, step_deg: float = 1.0) -> List[Tuple[float, float]]:
    """Trace the terminator as a (lat, lon) polyline from lon -180 to 180.

    Args:
        instant: Absolute time (naive values are UTC)
        step_deg: Longitude step in degrees

    Returns:
        List of (lat, lon) tuples, both ends included

    Raises:
        ValueError: If step_deg is not positive
    """
    if step_deg <= 0:
        raise ValueError(f"step_deg must be positive, got {step_deg}")

    sub_lat, sub_lon = subsolar_point(instant)
    sin_s = math.sin(math.radians(sub_lat))
    cos_s = math.cos(math.radians(sub_lat))

    points = []
    count = int(math.ceil(360.0 / step_deg))
    for i in range(count + 1):
        lon = min(-180.0 + i * step_deg, 180.0)
        dlon = math.radians(lon - sub_lon)
        # sin(lat) sin(s) + cos(lat) cos(s) cos(dlon) = 0
        if abs(sin_s) < 1e-12:
            num = -cos_s * math.cos(dlon)
            lat = 0.0 if abs(num) < 1e-12 else math.copysign(90.0, num)
        else:
            lat = math.degrees(math.atan(-cos_s * math.cos(dlon) / sin_s))
        points.append((lat, lon))
    return points


def sun_incidence(lat: float, lon: float, instant: datetime) -> float:
    """Cosine of the sun's zenith angle at a point (n.l)."""
    normal = lat_lon_to_vec3(lat, lon, 1.0)
    return vec3_dot(normal, sun_direction_scene(instant))


def is_daylight(lat: float, lon: float, instant: datetime) -> bool:
    """True if the sun is above the geometric horizon at a point."""
    return sun_incidence(lat, lon, instant) > 0


def day_night_blend(lat: float, lon: float, instant: datetime) -> float:
    """Blend factor between night (0) and day (1) textures at a point."""
    return smoothstep_edges(-TWILIGHT_EDGE, TWILIGHT_EDGE, sun_incidence(lat, lon, instant))
