"""Point-in-country lookup over GeoJSON features."""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from scene_core.countries.names import UNKNOWN_NAME
from scene_core.utils.geo_utils import bbox_contains, feature_bbox, geometry_contains


@dataclass
class CountryEntry:
    """A country feature with its precomputed bounding box."""
    name: str
    bbox: List[float]
    feature: Dict[str, Any]


class CountryIndex:
    """Finds the country containing a latitude/longitude.

    Features whose bounding box contains the point are tested first. If none
    of them contains it (e.g. rings crossing the antimeridian give misleading
    boxes), every feature is tested.
    """

    def __init__(self, features: Iterable[Dict[str, Any]]):
        self.entries: List[CountryEntry] = []
        for f in features:
            props = f.get('properties') or {}
            self.entries.append(CountryEntry(
                name=props.get('name') or UNKNOWN_NAME,
                bbox=feature_bbox(f.get('geometry')),
                feature=f,
            ))

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def named_count(self) -> int:
        """Number of features with a known name."""
        return sum(1 for e in self.entries if e.name != UNKNOWN_NAME)

    def candidates(self, lat: float, lon: float) -> List[CountryEntry]:
        """Entries whose bounding box contains the point."""
        return [e for e in self.entries if bbox_contains(e.bbox, lat, lon)]

    def pick(self, lat: float, lon: float) -> Optional[Dict[str, Any]]:
        """Return the feature containing the point, or None (e.g. ocean)."""
        for entry in self.candidates(lat, lon):
            if geometry_contains(entry.feature.get('geometry'), lon, lat):
                return entry.feature
        for entry in self.entries:
            if geometry_contains(entry.feature.get('geometry'), lon, lat):
                return entry.feature
        return None

    def pick_name(self, lat: float, lon: float) -> Optional[str]:
        """Name of the country at the point, or None."""
        feature = self.pick(lat, lon)
        if feature is None:
            return None
        return (feature.get('properties') or {}).get('name') or UNKNOWN_NAME
