"""Flat CSV output: one row per record, lines placed at their vertex mean."""
import csv
from typing import Dict, Any, List, Set

from scene_core.export.base import ExportBatch, BaseExporter


class CSVExporter(BaseExporter):
    """Export to CSV, property columns sorted after id/type/lat/lon."""

    PRIMARY_COLUMNS = ['id', 'type', 'lat', 'lon']

    def __init__(self, include_metadata: bool = False):
        """Create the exporter.

        Args:
            include_metadata: Include a vertex count column
        """
        self.include_metadata = include_metadata

    def get_format_name(self) -> str:
        return 'csv'

    def export(self, batch: ExportBatch, output_file: str) -> Dict[str, Any]:
        """Write the batch as CSV rows.

        Lines are written at the mean of their vertices.

        Args:
            batch: ExportBatch with the records
            output_file: Output file path

        Returns:
            Result dict with column and row counts in the metadata
        """
        property_columns: Set[str] = set()
        rows: List[Dict[str, Any]] = []

        for record in batch.records:
            lat, lon = record.center()
            row = {
                'id': record.id,
                'type': record.geometry_type,
                'lat': lat,
                'lon': lon,
            }
            row.update(record.properties)
            property_columns.update(record.properties.keys())

            if self.include_metadata:
                row['vertex_count'] = (len(record.coordinates)
                                       if record.geometry_type == 'line' else
                                       (1 if record.coordinates else 0))
            rows.append(row)

        # Order columns: primary, then properties, then metadata
        ordered_columns = self.PRIMARY_COLUMNS + sorted(
            col for col in property_columns if col not in self.PRIMARY_COLUMNS
        )
        if self.include_metadata:
            ordered_columns.append('vertex_count')

        with open(output_file, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=ordered_columns,
                                    extrasaction='ignore')
            writer.writeheader()
            writer.writerows(rows)

        return {
            'metadata': batch.build_metadata(
                format='csv',
                columns=len(ordered_columns),
                rows=len(rows),
                include_metadata=self.include_metadata
            )
        }
