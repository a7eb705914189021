"""Pytest fixtures for threescape tests."""
import json
from datetime import datetime, timezone

import pytest


@pytest.fixture
def june_solstice():
    """June solstice 2024 (20 Jun 20:51 UTC)."""
    return datetime(2024, 6, 20, 20, 51, tzinfo=timezone.utc)


@pytest.fixture
def december_solstice():
    """December solstice 2024 (21 Dec 09:20 UTC)."""
    return datetime(2024, 12, 21, 9, 20, tzinfo=timezone.utc)


@pytest.fixture
def march_equinox():
    """March equinox 2024 (20 Mar 03:06 UTC)."""
    return datetime(2024, 3, 20, 3, 6, tzinfo=timezone.utc)


def square(min_lon, min_lat, max_lon, max_lat):
    """Closed counter-clockwise square ring."""
    return [[min_lon, min_lat], [max_lon, min_lat], [max_lon, max_lat],
            [min_lon, max_lat], [min_lon, min_lat]]


@pytest.fixture
def two_countries():
    """Two square GeoJSON features side by side, with numeric ids."""
    return [
        {'type': 'Feature', 'id': 4, 'properties': {},
         'geometry': {'type': 'Polygon', 'coordinates': [square(0, 0, 10, 10)]}},
        {'type': 'Feature', 'id': '250', 'properties': {},
         'geometry': {'type': 'MultiPolygon', 'coordinates': [
             [square(20, 0, 30, 10)],
             [square(40, 0, 45, 5)],
         ]}},
    ]


@pytest.fixture
def countries_geojson(tmp_path, two_countries):
    """GeoJSON FeatureCollection file with the two squares."""
    file = tmp_path / "countries.geojson"
    file.write_text(json.dumps({'type': 'FeatureCollection', 'features': two_countries}))
    return file


@pytest.fixture
def countries_tsv(tmp_path):
    """Id/name table for the two squares."""
    file = tmp_path / "countries.tsv"
    file.write_text("id\tname\n004\tSquareland\n250\tDoubleland\n")
    return file


@pytest.fixture
def quantized_topology():
    """Quantized TopoJSON with one two-arc square and one reversed-arc square."""
    return {
        'type': 'Topology',
        'transform': {'scale': [1, 1], 'translate': [0, 0]},
        'objects': {
            'countries': {
                'type': 'GeometryCollection',
                'geometries': [
                    {'type': 'Polygon', 'id': '4', 'arcs': [[0, 1]], 'properties': {}},
                    {'type': 'MultiPolygon', 'id': 250, 'arcs': [[[~2]]]},
                ],
            },
        },
        'arcs': [
            [[0, 0], [10, 0], [0, 10]],
            [[10, 10], [-10, 0], [0, -10]],
            [[20, 0], [0, 10], [10, 0], [0, -10], [-10, 0]],
        ],
    }
