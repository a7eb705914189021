"""JSON and GeoJSON export functionality."""
import json
from typing import Any, Dict

from scene_core.export.base import ExportBatch, BaseExporter, LINE, POINT


class JSONExporter(BaseExporter):
    """Export records as a plain JSON document."""

    def get_format_name(self) -> str:
        return 'json'

    def export(self, batch: ExportBatch, output_file: str) -> Dict[str, Any]:
        """Export records to JSON.

        Args:
            batch: ExportBatch with the records
            output_file: Output file path

        Returns:
            Result dict with records and metadata
        """
        result = {
            'records': [r.to_dict() for r in batch.records],
            'metadata': batch.build_metadata(format='json'),
        }

        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=2, default=str)

        return result


class GeoJSONExporter(BaseExporter):
    """Export to an RFC 7946 GeoJSON FeatureCollection.

    Points and line strings are written as-is. Records without geometry
    are skipped unless include_empty is set, in which case they become
    features with a null geometry.
    """

    def __init__(self, include_empty: bool = False):
        self.include_empty = include_empty

    def get_format_name(self) -> str:
        return 'geojson'

    def export(self, batch: ExportBatch, output_file: str) -> Dict[str, Any]:
        """Export to GeoJSON FeatureCollection.

        Args:
            batch: ExportBatch with the records
            output_file: Output file path

        Returns:
            Result dict with metadata
        """
        features = []
        for record in batch.records:
            if record.geometry_type not in (POINT, LINE) and not self.include_empty:
                continue
            features.append(record.to_geojson_feature())

        geojson = {
            'type': 'FeatureCollection',
            'features': features,
            'properties': {
                'source': batch.source,
                'generator': 'threescape',
                'feature_count': len(features),
            }
        }

        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(geojson, f, indent=2)

        return {
            'metadata': batch.build_metadata(
                format='geojson',
                features_exported=len(features),
                points_exported=sum(1 for f in features if f['geometry'] and f['geometry']['type'] == 'Point'),
                lines_exported=sum(1 for f in features if f['geometry'] and f['geometry']['type'] == 'LineString'),
            )
        }
