"""Solar system orbit model, simulation clock and camera focus tween.

Orbits are circles on the XZ plane centred on the sun. Angles grow
linearly with simulated days, so a planet returns to its start after
exactly one orbital period.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from scene_core.models.bodies import Body, ScaleConfig, SCALE, SUN, PLANETS
from scene_core.utils.geo_utils import Vec3, vec3_length
from scene_core.utils.math_utils import Color, clamp, css_to_rgb, ease_in_out_quad, lerp

# Simulated days per real second at time scale 1
BASE_SIM_DAYS_PER_SECOND = 5.0

# Time scale limits
MIN_TIME_SCALE = 1 / 16
MAX_TIME_SCALE = 256.0

# Longest frame step accepted by the clock (seconds)
MAX_FRAME_DT = 0.05

# Length of the time slider in days
EARTH_YEAR_DAYS = 365.25

# Default focus tween duration (seconds)
FOCUS_DURATION = 1.4

# View direction used when the camera sits exactly on the target
FALLBACK_VIEW_DIRECTION = (0.0, 0.6, 0.8)


@dataclass
class ScaledBody:
    """A body with its scene-space radius and orbital distance."""
    body: Body
    radius_u: float
    distance_u: float


@dataclass
class SunPulse:
    """Sun light intensity and color for one frame."""
    pulse: float
    intensity: float
    color_multiplier: float
    color: Color


class SolarSystemModel:
    """Scaled bodies and their positions for a given simulated day."""

    def __init__(self, sun: Body = SUN, planets: Sequence[Body] = None,
                 scale: ScaleConfig = SCALE):
        self.sun = sun
        self.scale = scale
        self.planets: Dict[str, ScaledBody] = {}
        for p in (PLANETS if planets is None else planets):
            self.planets[p.name] = ScaledBody(
                body=p,
                radius_u=p.radius_km * scale.radius,
                distance_u=p.distance_km * scale.distance,
            )

    @property
    def sun_radius_u(self) -> float:
        """Scene radius of the sun, shrunk by the sun multiplier."""
        return self.sun.radius_km * self.scale.radius * self.scale.sun_radius_multiplier

    def names(self) -> List[str]:
        """All pickable body names, sun first."""
        return [self.sun.name] + list(self.planets)

    def body(self, name: str) -> Body:
        """Look up the sun or a planet of this model.

        Raises:
            KeyError: If the model has no such body
        """
        if name == self.sun.name:
            return self.sun
        return self._scaled(name).body

    def radius_u(self, name: str) -> float:
        """Scene radius of a body."""
        if name == self.sun.name:
            return self.sun_radius_u
        return self._scaled(name).radius_u

    def _scaled(self, name: str) -> ScaledBody:
        try:
            return self.planets[name]
        except KeyError:
            raise KeyError(f"Unknown body: {name}") from None

    def orbit_angle(self, name: str, days: float) -> float:
        """Orbital angle in radians after `days` simulated days."""
        p = self._scaled(name)
        return days / p.body.period_days * math.pi * 2

    def planet_position(self, name: str, days: float) -> Vec3:
        """Scene position of a body after `days` simulated days.

        The sun stays at the origin.
        """
        if name == self.sun.name:
            return (0.0, 0.0, 0.0)
        p = self._scaled(name)
        theta = self.orbit_angle(name, days)
        return (math.cos(theta) * p.distance_u, 0.0, math.sin(theta) * p.distance_u)

    def positions(self, days: float) -> Dict[str, Vec3]:
        """Positions of every planet after `days` simulated days."""
        return {name: self.planet_position(name, days) for name in self.planets}

    def orbit_circle(self, name: str) -> List[Vec3]:
        """Closed polyline of a planet's orbit.

        Returns:
            segments + 1 points; the last repeats the first
        """
        radius = self._scaled(name).distance_u
        segments = orbit_segments(radius)
        points = []
        for i in range(segments + 1):
            a = i / segments * math.pi * 2
            points.append((math.cos(a) * radius, 0.0, math.sin(a) * radius))
        return points

    def sun_pulse(self, days: float) -> SunPulse:
        """Slow breathing of the sun's light and color."""
        t = days * 0.02
        pulse = 0.5 + 0.5 * math.sin(t * math.pi * 2)
        mult = 1 + pulse * 0.15
        r, g, b = css_to_rgb(self.sun.color)
        return SunPulse(
            pulse=pulse,
            intensity=1.8 + pulse * 0.7,
            color_multiplier=mult,
            color=(min(255, round(r * mult)), min(255, round(g * mult)), min(255, round(b * mult))),
        )


def orbit_segments(radius: float) -> int:
    """Polyline segment count for an orbit of the given scene radius."""
    return max(64, min(256, int(math.floor(radius * 6))))


class SimulationClock:
    """Play/pause state and accumulated simulated days."""

    def __init__(self, days: float = 0.0, time_scale: float = 1.0, playing: bool = True):
        self.days = days
        self.time_scale = clamp(time_scale, MIN_TIME_SCALE, MAX_TIME_SCALE)
        self.playing = playing

    def advance(self, dt: float) -> float:
        """Advance by one frame of dt real seconds.

        Returns:
            Current simulated days
        """
        dt = min(MAX_FRAME_DT, dt)
        if self.playing:
            self.days += dt * BASE_SIM_DAYS_PER_SECOND * self.time_scale
        return self.days

    def step(self, direction: int) -> float:
        """Move one day forward (+1) or back (-1) and pause."""
        self.days += direction * 1
        self.playing = False
        return self.days

    def toggle(self) -> bool:
        """Flip play/pause and return the new state."""
        self.playing = not self.playing
        return self.playing

    def bump_speed(self, factor: float) -> float:
        """Multiply the time scale, clamped to its limits."""
        self.time_scale = clamp(self.time_scale * factor, MIN_TIME_SCALE, MAX_TIME_SCALE)
        return self.time_scale

    @property
    def slider_value(self) -> float:
        """Position within the current Earth year in [0, 1)."""
        return (self.days % EARTH_YEAR_DAYS) / EARTH_YEAR_DAYS

    def set_slider(self, t01: float, from_user: bool = False):
        """Jump to a point in the first Earth year.

        Dragging the slider (from_user) also pauses playback.
        """
        self.days = t01 * EARTH_YEAR_DAYS
        if from_user:
            self.playing = False

    @property
    def progress_label(self) -> str:
        return f"{self.slider_value * 100:.1f}%"

    @property
    def speed_label(self) -> str:
        return f"Speed {self.time_scale:.2f}×"


class CameraTween:
    """Eased interpolation of camera position and look-at target."""

    def __init__(self, from_pos: Vec3, to_pos: Vec3, from_target: Vec3, to_target: Vec3,
                 duration: float = FOCUS_DURATION):
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        self.from_pos = tuple(from_pos)
        self.to_pos = tuple(to_pos)
        self.from_target = tuple(from_target)
        self.to_target = tuple(to_target)
        self.duration = duration
        self.elapsed = 0.0

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration

    def update(self, dt: float) -> Tuple[Vec3, Vec3]:
        """Advance the tween.

        Returns:
            (camera position, look-at target) for this frame
        """
        self.elapsed = min(self.elapsed + dt, self.duration)
        e = ease_in_out_quad(self.elapsed / self.duration)
        pos = tuple(lerp(a, b, e) for a, b in zip(self.from_pos, self.to_pos))
        target = tuple(lerp(a, b, e) for a, b in zip(self.from_target, self.to_target))
        return pos, target


def focus_tween(model: SolarSystemModel, name: str, camera: Vec3, target: Vec3,
                days: float, duration: float = FOCUS_DURATION) -> Optional[CameraTween]:
    """Build the tween that flies the camera to a body.

    The camera keeps its current bearing relative to the body and stops at
    max(10, 10 radii) + 8 scene units from it.

    Args:
        model: Solar system model
        name: Body to focus
        camera: Current camera position
        target: Current look-at target
        days: Simulated day (for the body's position)
        duration: Tween length in seconds

    Returns:
        CameraTween, or None if the model has no such body
    """
    if name != model.sun.name and name not in model.planets:
        return None
    body_pos = model.planet_position(name, days)
    back = tuple(c - b for c, b in zip(camera, body_pos))
    length = vec3_length(back)
    if length == 0 or not math.isfinite(length):
        back = FALLBACK_VIEW_DIRECTION
        length = vec3_length(back)
    back = tuple(c / length for c in back)

    distance = max(10, model.radius_u(name) * 10) + 8
    to_pos = tuple(b + d * distance for b, d in zip(body_pos, back))
    return CameraTween(camera, to_pos, target, body_pos, duration)
