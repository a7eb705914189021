"""Latlon command - convert between lat/lon and globe coordinates."""
import json
import sys

from scene_core.utils.geo_utils import lat_lon_to_vec3, vec3_to_lat_lon


def setup_parser(subparsers):
    """Setup the latlon subcommand parser."""
    parser = subparsers.add_parser(
        'latlon',
        help='Convert lat/lon to globe coordinates (or back)',
        description='Convert latitude/longitude to a point on the y-up globe '
                    'sphere, or with --inverse a point back to latitude/longitude'
    )

    parser.add_argument(
        'values',
        nargs='+',
        type=float,
        help='LAT LON, or X Y Z with --inverse'
    )
    parser.add_argument(
        '--inverse',
        action='store_true',
        help='Convert X Y Z to latitude/longitude'
    )
    parser.add_argument(
        '--radius', '-r',
        type=float,
        default=1.0,
        help='Sphere radius (default: 1)'
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
    """Execute the latlon command."""
    if args.inverse:
        if len(args.values) != 3:
            print("Error: --inverse needs X Y Z", file=sys.stderr)
            return 1
        try:
            lat, lon = vec3_to_lat_lon(*args.values)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        result = {'lat': lat, 'lon': lon}
        text = f"lat={lat:.6f} lon={lon:.6f}"
    else:
        if len(args.values) != 2:
            print("Error: expected LAT LON", file=sys.stderr)
            return 1
        lat, lon = args.values
        if not -90 <= lat <= 90:
            print(f"Error: Latitude must be -90 to 90, got {lat}", file=sys.stderr)
            return 1
        x, y, z = lat_lon_to_vec3(lat, lon, args.radius)
        result = {'x': x, 'y': y, 'z': z}
        text = f"x={x:.6f} y={y:.6f} z={z:.6f}"

    if args.format == 'json':
        print(json.dumps(result, indent=2))
    else:
        print(text)
    return 0
