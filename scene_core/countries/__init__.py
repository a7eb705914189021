"""Country boundaries, names and point lookup."""

from scene_core.countries.names import normalize_feature_id, parse_country_names, apply_names
from scene_core.countries.topology import topology_to_geojson, as_feature_collection
from scene_core.countries.index import CountryIndex, CountryEntry
from scene_core.countries.loader import (
    DEFAULT_SOURCES, DatasetUnavailableError, LoadedCountries, load_countries, load_pair,
)

__all__ = [
    'normalize_feature_id', 'parse_country_names', 'apply_names',
    'topology_to_geojson', 'as_feature_collection',
    'CountryIndex', 'CountryEntry',
    'DEFAULT_SOURCES', 'DatasetUnavailableError', 'LoadedCountries',
    'load_countries', 'load_pair',
]
