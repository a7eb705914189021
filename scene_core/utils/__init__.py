"""Utility functions for scene math, geography and time zones."""

from scene_core.utils.geo_utils import lat_lon_to_vec3, vec3_to_lat_lon
from scene_core.utils.time_utils import (
    list_iana_time_zones, date_with_time_zone, UnknownTimeZoneError
)

__all__ = [
    'lat_lon_to_vec3', 'vec3_to_lat_lon',
    'list_iana_time_zones', 'date_with_time_zone', 'UnknownTimeZoneError',
]
