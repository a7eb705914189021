"""Terminator command - day/night boundary as a line."""
import json
import os
import sys

from scene_core.export.base import ExportBatch
from scene_core.export.csv_exporter import CSVExporter
from scene_core.export.json_exporter import GeoJSONExporter, JSONExporter
from scene_core.export.records import line_vertex_records, terminator_records
from scene_core.utils.time_utils import UnknownTimeZoneError, parse_instant

FORMAT_EXTENSIONS = {
    '.geojson': 'geojson',
    '.json': 'json',
    '.csv': 'csv',
    '.shp': 'shapefile',
}


def setup_parser(subparsers):
    """Setup the terminator subcommand parser."""
    parser = subparsers.add_parser(
        'terminator',
        help='Trace the day/night terminator',
        description='Trace the day/night terminator line for an instant and '
                    'export it with the subsolar point'
    )

    parser.add_argument('-o', '--output', help='Output file (default: GeoJSON to stdout)')
    parser.add_argument(
        '--time', '-t',
        default='now',
        help='ISO-8601 time (default: now)'
    )
    parser.add_argument(
        '--tz',
        default='UTC',
        help='Time zone for naive --time values (default: UTC)'
    )
    parser.add_argument(
        '--step',
        type=float,
        default=1.0,
        help='Longitude step in degrees (default: 1)'
    )
    parser.add_argument(
        '-f', '--format',
        choices=['geojson', 'json', 'csv', 'shapefile'],
        help='Output format (default: from extension, else geojson)'
    )
    parser.add_argument(
        '--no-subsolar',
        action='store_true',
        help='Omit the subsolar point'
    )

    parser.set_defaults(func=run)
    return parser


def _determine_format(args) -> str:
    if args.format:
        return args.format
    if args.output:
        ext = os.path.splitext(args.output)[1].lower()
        return FORMAT_EXTENSIONS.get(ext, 'geojson')
    return 'geojson'


def _exporter(fmt):
    if fmt == 'json':
        return JSONExporter()
    if fmt == 'csv':
        return CSVExporter()
    if fmt == 'shapefile':
        from scene_core.export.shapefile_exporter import ShapefileExporter
        return ShapefileExporter()
    return GeoJSONExporter()


def run(args):
    """Execute the terminator command."""
    try:
        instant = parse_instant(args.time, args.tz)
        records = terminator_records(instant, args.step,
                                     include_subsolar=not args.no_subsolar)
        point_count = len(records[0].coordinates)
    except UnknownTimeZoneError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    fmt = _determine_format(args)
    if fmt == 'csv':
        # CSV has no line geometry: one row per vertex
        records = line_vertex_records(records)
    batch = ExportBatch(records, source=f"terminator {instant.isoformat()}")

    if not args.output:
        if fmt not in ('geojson', 'json'):
            print(f"Error: --output is required for {fmt} format", file=sys.stderr)
            return 1
        if fmt == 'json':
            output = {'records': [r.to_dict() for r in batch.records]}
        else:
            output = {'type': 'FeatureCollection',
                      'features': [r.to_geojson_feature() for r in batch.records]}
        print(json.dumps(output, indent=2))
        return 0

    try:
        exporter = _exporter(fmt)
    except ImportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = exporter.export(batch, args.output)

    if not getattr(args, 'quiet', False):
        print(f"Saved terminator ({point_count} points) to: {args.output}")
        files = result['metadata'].get('files_created')
        if files:
            for path in files:
                print(f"  {path}")
    return 0
