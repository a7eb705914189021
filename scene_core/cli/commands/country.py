"""Country command - pick the country at a latitude/longitude."""
import json
import sys
import warnings

from scene_core.countries.loader import DEFAULT_SOURCES, DatasetUnavailableError, load_countries
from scene_core.simulation.globe import hover_report
from scene_core.utils.time_utils import UnknownTimeZoneError, parse_instant


def setup_parser(subparsers):
    """Setup the country subcommand parser."""
    parser = subparsers.add_parser(
        'country',
        help='Find the country at a point',
        description='Find the country containing a latitude/longitude and '
                    'report its approximate time zone against yours'
    )

    parser.add_argument('lat', type=float, help='Latitude')
    parser.add_argument('lon', type=float, help='Longitude')
    parser.add_argument(
        '--boundaries',
        help='GeoJSON or TopoJSON boundaries file/URL (default: world-atlas download)'
    )
    parser.add_argument(
        '--names',
        help='TSV id/name table matching --boundaries'
    )
    parser.add_argument(
        '--tz',
        default='UTC',
        help='Your time zone for the comparison (default: UTC)'
    )
    parser.add_argument(
        '--time', '-t',
        default='now',
        help='ISO-8601 time for the comparison (default: now)'
    )
    parser.add_argument(
        '-f', '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )

    parser.set_defaults(func=run)
    return parser


def run(args):
    """Execute the country command."""
    if not -90 <= args.lat <= 90:
        print(f"Error: Latitude must be -90 to 90, got {args.lat}", file=sys.stderr)
        return 1

    sources = [(args.boundaries, args.names)] if args.boundaries else DEFAULT_SOURCES

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        try:
            loaded = load_countries(sources)
        except DatasetUnavailableError as e:
            for w in caught:
                print(f"Warning: {w.message}", file=sys.stderr)
            print(f"Error: {e}", file=sys.stderr)
            return 1
    if not getattr(args, 'quiet', False):
        for w in caught:
            print(f"Warning: {w.message}", file=sys.stderr)

    if getattr(args, 'verbose', 0):
        print(f"Countries loaded: {loaded.boundaries} names: {loaded.names} "
              f"mapped={loaded.mapped}/{loaded.total}", file=sys.stderr)

    name = loaded.index.pick_name(args.lat, args.lon)
    if name is None:
        if args.format == 'json':
            print(json.dumps(None))
        else:
            print(f"No country at {args.lat}, {args.lon}")
        return 0

    try:
        report = hover_report(name, args.lat, args.lon, args.tz, parse_instant(args.time))
    except UnknownTimeZoneError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.to_text())
    return 0
