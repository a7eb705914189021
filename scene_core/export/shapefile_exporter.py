"""ESRI Shapefile output for geographic records.

Install the optional dependency with: pip install threescape[shapefile]

A shapefile holds a single shape type, so one batch becomes up to two
layers next to each other: <base>_points and <base>_lines. Records with
no geometry (planet rows, for instance) have no place in either layer.
"""
import os
from typing import Dict, Any, Iterable, List

from scene_core.export.base import ExportBatch, BaseExporter, GeoRecord, LINE, POINT

try:
    import shapefile
    HAS_PYSHP = True
except ImportError:
    HAS_PYSHP = False
    shapefile = None


# .prj content for plain longitude/latitude on WGS84
WGS84_PRJ = (
    'GEOGCS["GCS_WGS_1984",DATUM["D_WGS_1984",'
    'SPHEROID["WGS_1984",6378137,298.257223563]],'
    'PRIMEM["Greenwich",0],UNIT["Degree",0.017453292519943295]]'
)

# (geometry type, layer suffix) in output order
LAYERS = ((POINT, 'points'), (LINE, 'lines'))


class ShapefileExporter(BaseExporter):
    """Write point and line records as WGS84 shapefile layers.

    Every property becomes a character field. DBF caps field names at
    10 characters; clashing prefixes get a numeric tail.
    """

    MAX_FIELD_NAME = 10
    MAX_VALUE_LENGTH = 254

    def __init__(self):
        if not HAS_PYSHP:
            raise ImportError(
                "Shapefile output needs pyshp. "
                "Install with: pip install threescape[shapefile]"
            )

    def get_format_name(self) -> str:
        return 'shapefile'

    @staticmethod
    def is_available() -> bool:
        return HAS_PYSHP

    def export(self, batch: ExportBatch, output_file: str) -> Dict[str, Any]:
        """Write one layer per geometry type present in the batch.

        Args:
            batch: Records to write
            output_file: Target path; any extension is replaced by the layer suffix

        Returns:
            Result dict whose metadata lists the .shp files written
        """
        stem = os.path.splitext(output_file)[0]
        written = []
        counts = {}
        for geometry_type, suffix in LAYERS:
            records = batch.of_type(geometry_type)
            counts[geometry_type] = len(records)
            if not records:
                continue
            layer_path = f"{stem}_{suffix}"
            self._write_layer(layer_path, geometry_type, records)
            written.append(f"{layer_path}.shp")

        exported = counts[POINT] + counts[LINE]
        return {
            'metadata': batch.build_metadata(
                format='shapefile',
                files_created=written,
                points_exported=counts[POINT],
                lines_exported=counts[LINE],
                skipped=len(batch.records) - exported,
            )
        }

    def _write_layer(self, layer_path: str, geometry_type: str,
                     records: List[GeoRecord]) -> None:
        shape_type = shapefile.POINT if geometry_type == POINT else shapefile.POLYLINE
        fields = self._field_mapping(records)

        writer = shapefile.Writer(layer_path, shapeType=shape_type)
        writer.field('rec_id', 'C', 40)
        for dbf_name in fields.values():
            writer.field(dbf_name, 'C', 100)

        for record in records:
            if shape_type == shapefile.POINT:
                lon, lat = record.coordinates[0], record.coordinates[1]
                writer.point(lon, lat)
            else:
                writer.line([[list(vertex) for vertex in record.coordinates]])
            writer.record(rec_id=str(record.id), **self._dbf_values(record, fields))
        writer.close()

        with open(f"{layer_path}.prj", 'w', encoding='utf-8') as prj:
            prj.write(WGS84_PRJ)

    def _dbf_values(self, record: GeoRecord, fields: Dict[str, str]) -> Dict[str, str]:
        values = {}
        for prop, dbf_name in fields.items():
            value = record.properties.get(prop)
            values[dbf_name] = '' if value is None else str(value)[:self.MAX_VALUE_LENGTH]
        return values

    def _field_mapping(self, records: Iterable[GeoRecord]) -> Dict[str, str]:
        """Property name -> DBF field name, in sorted property order."""
        props = sorted({key for record in records for key in record.properties})
        mapping: Dict[str, str] = {}
        for prop in props:
            mapping[prop] = self._truncate_field_name(prop, ['rec_id', *mapping.values()])
        return mapping

    def _truncate_field_name(self, name: str, existing: List[str]) -> str:
        """Shorten name to MAX_FIELD_NAME, adding 1, 2, ... until it is unused."""
        candidate = name[:self.MAX_FIELD_NAME]
        counter = 0
        while candidate in existing:
            counter += 1
            tail = str(counter)
            candidate = name[:self.MAX_FIELD_NAME - len(tail)] + tail
        return candidate


def shapefile_available() -> bool:
    """True when pyshp can be imported."""
    return HAS_PYSHP
