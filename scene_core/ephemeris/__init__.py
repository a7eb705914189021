"""
Solar ephemeris submodule.

- sun: NOAA low-precision solar series, subsolar point, local sun study model
- terminator: day/night boundary and shading blend
"""

from .sun import (
    SolarCoordinates,
    SunPosition,
    SunLight,
    julian_day,
    solar_coordinates,
    sun_direction_eci,
    sun_direction_scene,
    subsolar_point,
    solar_position,
    sun_light_state,
)
from .terminator import terminator_points, is_daylight, day_night_blend

__all__ = [
    'SolarCoordinates',
    'SunPosition',
    'SunLight',
    'julian_day',
    'solar_coordinates',
    'sun_direction_eci',
    'sun_direction_scene',
    'subsolar_point',
    'solar_position',
    'sun_light_state',
    'terminator_points',
    'is_daylight',
    'day_night_blend',
]
