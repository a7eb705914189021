"""Rotating globe state: spin, axial tilt, auto-orbit camera and hover reports.

The globe mesh is tilted about z by the axial tilt and spun about its own
y axis. Points are converted between the scene (world) frame and the
globe's Earth-fixed local frame with the same rotation order the renderer
uses (tilt applied first, then spin).
"""
import math
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, Optional, Sequence, Tuple
from urllib.parse import quote

from scene_core.ephemeris.sun import sun_direction_scene
from scene_core.utils.geo_utils import Vec3, format_offset, guess_timezone_offset, vec3_to_lat_lon
from scene_core.utils.time_utils import (
    TimeZoneLike, describe_offset_difference, format_time_in_time_zone,
    resolve_time_zone, utc_offset_hours,
)

DEFAULT_WIKI_BASE = 'https://en.wikipedia.org/wiki/'


@dataclass
class GlobeParams:
    """Globe and camera defaults."""
    radius: float = 1.0
    axial_tilt_deg: float = 23.44
    spin_rate: float = 0.05
    orbit_rate: float = 0.03
    camera_start: Tuple[float, float, float] = (0.0, 1.6, 4.2)


def _rotate_y(v: Sequence[float], angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return (v[0] * c + v[2] * s, v[1], -v[0] * s + v[2] * c)


def _rotate_z(v: Sequence[float], angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return (v[0] * c - v[1] * s, v[0] * s + v[1] * c, v[2])


@dataclass
class GlobeState:
    """Mutable per-frame state of the globe view."""
    params: GlobeParams = field(default_factory=GlobeParams)
    time_zone: str = 'UTC'
    auto_orbit: bool = True
    show_stars: bool = True
    spin: float = 0.0
    camera: Optional[Vec3] = None

    def __post_init__(self):
        if self.camera is None:
            self.camera = tuple(self.params.camera_start)
        self.set_time_zone(self.time_zone)

    @property
    def tilt(self) -> float:
        """Axial tilt in radians."""
        return math.radians(self.params.axial_tilt_deg)

    @property
    def camera_azimuth(self) -> float:
        """Camera bearing around the y axis in radians."""
        return math.atan2(self.camera[0], self.camera[2])

    def tick(self, dt: float):
        """Advance spin and, when enabled, the auto-orbiting camera."""
        if self.auto_orbit:
            self.camera = _rotate_y(self.camera, self.params.orbit_rate * dt)
        self.spin += self.params.spin_rate * dt

    def set_time_zone(self, name: str):
        """Select the display zone.

        Raises:
            UnknownTimeZoneError: If the zone cannot be resolved
        """
        resolve_time_zone(name)
        self.time_zone = name

    def local_to_world(self, p: Sequence[float]) -> Vec3:
        """Earth-fixed point to scene coordinates."""
        return _rotate_y(_rotate_z(p, self.tilt), self.spin)

    def world_to_local(self, p: Sequence[float]) -> Vec3:
        """Scene point to Earth-fixed coordinates, undoing spin and tilt."""
        return _rotate_z(_rotate_y(p, -self.spin), -self.tilt)

    def local_point_to_lat_lon(self, p: Sequence[float]) -> Tuple[float, float]:
        """Latitude/longitude under a scene-space point on (or above) the globe."""
        return vec3_to_lat_lon(*self.world_to_local(p))

    def sun_direction(self, now: datetime) -> Vec3:
        """Earth-fixed unit vector towards the sun at an absolute instant.

        The display zone does not affect it.
        """
        return sun_direction_scene(now)

    def sun_direction_world(self, now: datetime) -> Vec3:
        """Sun direction in scene coordinates for the current spin."""
        return self.local_to_world(self.sun_direction(now))

    def clock_text(self, now: datetime) -> str:
        """HH:MM:SS in the display zone."""
        return format_time_in_time_zone(now, self.time_zone)


@dataclass
class HoverReport:
    """Tooltip content for a country under the pointer."""
    name: str
    lat: float
    lon: float
    offset_guess: int
    offset_label: str
    local_time_zone: str
    difference_hours: float
    difference_label: str
    wiki_url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_text(self) -> str:
        return (
            f"{self.name}\n"
            f"Longitude {self.lon:.1f}°, latitude {self.lat:.1f}°\n"
            f"Approx. time zone {self.offset_label}, "
            f"vs local ({self.local_time_zone}): {self.difference_label}\n"
            f"{self.wiki_url}"
        )


def hover_report(country: str, lat: float, lon: float, local_tz: TimeZoneLike,
                 now: datetime, wiki_base: str = DEFAULT_WIKI_BASE) -> HoverReport:
    """Build the hover tooltip for a picked country.

    The zone is guessed from longitude alone (15 degrees per hour), which is
    coarse but needs no zone polygons.

    Args:
        country: Country name
        lat: Latitude under the pointer
        lon: Longitude under the pointer
        local_tz: Viewer's zone
        now: Instant used for the viewer's UTC offset
        wiki_base: Encyclopedia URL prefix

    Returns:
        HoverReport
    """
    guess = guess_timezone_offset(lon)
    local_offset = utc_offset_hours(now, local_tz)
    diff = guess - local_offset
    tz_name = local_tz if isinstance(local_tz, str) else str(local_tz)
    return HoverReport(
        name=country,
        lat=lat,
        lon=lon,
        offset_guess=guess,
        offset_label=f"UTC{format_offset(guess)}",
        local_time_zone=tz_name,
        difference_hours=diff,
        difference_label=describe_offset_difference(diff),
        wiki_url=wiki_base + quote(country, safe=''),
    )
