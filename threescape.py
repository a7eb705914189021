#!/usr/bin/env python3
"""
threescape - sun, globe, cloud and orbit calculations for 3D scenes

This is the CLI entry point. The implementation is in the scene_core package.

Usage:
    threescape sun --time 2024-06-21T12:00:00Z
    threescape terminator -o terminator.geojson
    threescape clouds clouds.png --low
    threescape planets --days 100

For more information, run: threescape --help
"""
import sys

# Re-export public API
from scene_core import (
    # Version
    __version__,
    # Ephemeris
    sun_direction_eci,
    sun_direction_scene,
    subsolar_point,
    terminator_points,
    # Geodesy and time
    lat_lon_to_vec3,
    vec3_to_lat_lon,
    list_iana_time_zones,
    date_with_time_zone,
    # Textures
    fbm_2d,
    make_cloud_texture,
    CloudSystem,
    # Scene models
    TowerLayout,
    SolarSystemModel,
    SimulationClock,
    GlobeState,
    # Countries
    CountryIndex,
    load_countries,
)

# Re-export CLI entry point
from scene_core.cli.main import main


def cli_main():
    """CLI entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
