"""
Scene Core - numeric engine behind the threescape 3D scenes.

This package computes what the tower explorer, solar system simulator and
rotating globe display: solar ephemeris and terminator, FBM cloud textures,
globe geodesy and time zones, tower layout, orbital motion and country
lookup, plus exporters for the computed data.
"""

__version__ = "1.0.0"

# Utilities
from scene_core.utils.geo_utils import lat_lon_to_vec3, vec3_to_lat_lon
from scene_core.utils.time_utils import (
    UnknownTimeZoneError, list_iana_time_zones, date_with_time_zone,
    to_iso_in_time_zone, format_time_in_time_zone,
)

# Ephemeris
from scene_core.ephemeris.sun import (
    sun_direction_eci, sun_direction_scene, subsolar_point, solar_position, sun_light_state,
)
from scene_core.ephemeris.terminator import terminator_points, is_daylight, day_night_blend

# Textures
from scene_core.textures.noise import hash2d, value_noise_2d, fbm_2d
from scene_core.textures.png_writer import PNGImage
from scene_core.textures.clouds import (
    CloudQuality, HIGH_QUALITY, LOW_QUALITY, CloudSystem, make_cloud_texture,
)

# Models
from scene_core.models.tower import TowerParams, TowerLayout
from scene_core.models.floors import FloorInfo, FLOORS, get_floor
from scene_core.models.bodies import Body, ScaleConfig, SCALE, SUN, PLANETS, get_body

# Simulation
from scene_core.simulation.orbits import SolarSystemModel, SimulationClock, CameraTween, focus_tween
from scene_core.simulation.scroll import ScrollController
from scene_core.simulation.globe import GlobeParams, GlobeState, hover_report

# Countries
from scene_core.countries import (
    CountryIndex, DatasetUnavailableError, load_countries, parse_country_names,
)

__all__ = [
    # Version
    '__version__',
    # Utilities
    'lat_lon_to_vec3', 'vec3_to_lat_lon',
    'UnknownTimeZoneError', 'list_iana_time_zones', 'date_with_time_zone',
    'to_iso_in_time_zone', 'format_time_in_time_zone',
    # Ephemeris
    'sun_direction_eci', 'sun_direction_scene', 'subsolar_point', 'solar_position',
    'sun_light_state', 'terminator_points', 'is_daylight', 'day_night_blend',
    # Textures
    'hash2d', 'value_noise_2d', 'fbm_2d', 'PNGImage',
    'CloudQuality', 'HIGH_QUALITY', 'LOW_QUALITY', 'CloudSystem', 'make_cloud_texture',
    # Models
    'TowerParams', 'TowerLayout', 'FloorInfo', 'FLOORS', 'get_floor',
    'Body', 'ScaleConfig', 'SCALE', 'SUN', 'PLANETS', 'get_body',
    # Simulation
    'SolarSystemModel', 'SimulationClock', 'CameraTween', 'focus_tween',
    'ScrollController', 'GlobeParams', 'GlobeState', 'hover_report',
    # Countries
    'CountryIndex', 'DatasetUnavailableError', 'load_countries', 'parse_country_names',
]
