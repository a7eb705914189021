"""Base classes for export functionality.

Provides GeoRecord, the unit every exporter writes, ExportBatch for shared
metadata, and the BaseExporter abstract class for format-specific
exporters.
"""
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

# Geometry kinds a record can carry
POINT = 'point'
LINE = 'line'
NO_GEOMETRY = 'none'


@dataclass
class GeoRecord:
    """One exported item.

    coordinates are [lon, lat] for points, [[lon, lat], ...] for lines and
    empty for records without geometry (e.g. planets).
    """
    id: str
    geometry_type: str
    coordinates: List[Any] = field(default_factory=list)
    properties: Dict[str, Any] = field(default_factory=dict)

    def center(self) -> Tuple[Optional[float], Optional[float]]:
        """Representative (lat, lon): the point itself or a line's vertex mean."""
        if self.geometry_type == POINT and self.coordinates:
            return self.coordinates[1], self.coordinates[0]
        if self.geometry_type == LINE and self.coordinates:
            n = len(self.coordinates)
            return (sum(c[1] for c in self.coordinates) / n,
                    sum(c[0] for c in self.coordinates) / n)
        return None, None

    def to_geojson_feature(self) -> Dict[str, Any]:
        """Convert to a GeoJSON Feature (null geometry when there is none)."""
        if self.geometry_type == POINT:
            geometry = {'type': 'Point', 'coordinates': list(self.coordinates)}
        elif self.geometry_type == LINE:
            geometry = {'type': 'LineString',
                        'coordinates': [list(c) for c in self.coordinates]}
        else:
            geometry = None
        return {
            'type': 'Feature',
            'id': self.id,
            'geometry': geometry,
            'properties': dict(self.properties),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'geometry_type': self.geometry_type,
            'coordinates': self.coordinates,
            'properties': self.properties,
        }


class ExportBatch:
    """Records to export plus the metadata every format reports."""

    def __init__(self, records: Iterable[GeoRecord], source: str = 'threescape'):
        """Initialize a batch.

        Args:
            records: Records to export
            source: Description of what produced the records
        """
        self.start_time = time.time()
        self.records: List[GeoRecord] = list(records)
        self.source = source

    def of_type(self, geometry_type: str) -> List[GeoRecord]:
        """Records with the given geometry type."""
        return [r for r in self.records if r.geometry_type == geometry_type]

    def build_metadata(self, **extras) -> Dict[str, Any]:
        """Build common metadata structure.

        Args:
            **extras: Additional metadata fields

        Returns:
            Metadata dictionary
        """
        return {
            'source': self.source,
            'records': len(self.records),
            'processing_time_seconds': time.time() - self.start_time,
            **extras
        }


class BaseExporter(ABC):
    """Abstract base class for exporters."""

    @abstractmethod
    def export(self, batch: ExportBatch, output_file: str) -> Dict[str, Any]:
        """Export records to file.

        Args:
            batch: ExportBatch with the records
            output_file: Output file path

        Returns:
            Metadata dictionary
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the format name (e.g., 'json', 'geojson').

        Returns:
            Format name string
        """
        pass
