"""Export functionality for various output formats."""

from scene_core.export.base import GeoRecord, ExportBatch, BaseExporter
from scene_core.export.json_exporter import JSONExporter, GeoJSONExporter
from scene_core.export.csv_exporter import CSVExporter
from scene_core.export.shapefile_exporter import ShapefileExporter, shapefile_available
from scene_core.export.records import line_vertex_records, terminator_records, planet_records

__all__ = [
    'GeoRecord', 'ExportBatch', 'BaseExporter',
    'JSONExporter', 'GeoJSONExporter', 'CSVExporter',
    'ShapefileExporter', 'shapefile_available',
    'line_vertex_records', 'terminator_records', 'planet_records',
]
