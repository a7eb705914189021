"""Loading country boundaries and names with ordered fallbacks.

A source is a (boundaries, names) pair. Boundaries are GeoJSON or TopoJSON,
names a TSV table; either may be a local path or an http(s) URL. Pairs are
tried in order until one loads.
"""
import json
import urllib.request
import warnings
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from scene_core.countries.index import CountryIndex
from scene_core.countries.names import NAME_COLUMN, UNKNOWN_NAME, apply_names, parse_country_names
from scene_core.countries.topology import as_feature_collection

WORLD_ATLAS_BASE = 'https://cdn.jsdelivr.net/npm/world-atlas@2/'

# Coarse dataset first, finer one as fallback
DEFAULT_SOURCES: Sequence[Tuple[str, Optional[str]]] = (
    (WORLD_ATLAS_BASE + 'countries-110m.json', WORLD_ATLAS_BASE + 'countries-110m.tsv'),
    (WORLD_ATLAS_BASE + 'countries-50m.json', WORLD_ATLAS_BASE + 'countries-50m.tsv'),
)

# Seconds to wait for each remote file
FETCH_TIMEOUT = 30

Opener = Callable[[str], bytes]


class DatasetUnavailableError(ValueError):
    """Raised when no country dataset could be loaded."""


@dataclass
class LoadedCountries:
    """A successfully loaded dataset."""
    index: CountryIndex
    boundaries: str
    names: Optional[str]
    mapped: int
    total: int


def is_url(location: str) -> bool:
    return location.startswith(('http://', 'https://'))


def fetch_url(url: str) -> bytes:
    """Download a URL and return its body."""
    request = urllib.request.Request(url, headers={'User-Agent': 'threescape'})
    with urllib.request.urlopen(request, timeout=FETCH_TIMEOUT) as response:
        return response.read()


def read_source(location: str, opener: Opener = None) -> str:
    """Read a local file or URL as UTF-8 text.

    Args:
        location: File path or http(s) URL
        opener: Callable returning the bytes of a URL (default: urllib)
    """
    if is_url(location):
        data = (opener or fetch_url)(location)
        return data.decode('utf-8')
    with open(location, 'r', encoding='utf-8') as f:
        return f.read()


def _names_from_properties(features) -> int:
    # No name table: reuse a name-like property when the file carries one
    mapped = 0
    for feature in features:
        props = feature.get('properties') or {}
        name = next((v for k, v in props.items() if NAME_COLUMN.match(k) and v), None)
        props['name'] = name or UNKNOWN_NAME
        feature['properties'] = props
        if name:
            mapped += 1
    return mapped


def load_pair(boundaries: str, names: Optional[str], opener: Opener = None) -> LoadedCountries:
    """Load one boundaries/names pair.

    Raises:
        OSError: If a file or URL cannot be read
        ValueError: If a document cannot be parsed
        KeyError: If a topology lacks the expected object
        IndexError, TypeError: If a GeoJSON geometry has malformed coordinates
    """
    collection = as_feature_collection(json.loads(read_source(boundaries, opener)))
    features = collection.get('features') or []
    if not isinstance(features, list) or not all(isinstance(f, dict) for f in features):
        raise ValueError("Boundary features must be a list of GeoJSON objects")
    if names:
        mapped = apply_names(features, parse_country_names(read_source(names, opener)))
    else:
        mapped = _names_from_properties(features)
    return LoadedCountries(
        index=CountryIndex(features),
        boundaries=boundaries,
        names=names,
        mapped=mapped,
        total=len(features),
    )


def load_countries(sources: Sequence[Tuple[str, Optional[str]]] = DEFAULT_SOURCES,
                   opener: Opener = None) -> LoadedCountries:
    """Load the first dataset in `sources` that works.

    Each failed pair is reported with warnings.warn before the next is
    tried.

    Args:
        sources: (boundaries, names) pairs in preference order
        opener: Callable returning the bytes of a URL (default: urllib)

    Returns:
        LoadedCountries for the first pair that loaded

    Raises:
        DatasetUnavailableError: If every pair failed
    """
    for boundaries, names in sources:
        try:
            return load_pair(boundaries, names, opener)
        except (OSError, ValueError, KeyError, IndexError, TypeError) as e:
            warnings.warn(f"Load countries attempt failed: {boundaries} / {names}: {e}")
    raise DatasetUnavailableError("All country dataset loads failed")
