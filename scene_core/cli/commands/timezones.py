"""Timezones command - list IANA zones or show the clock in one."""
import json
import sys

from scene_core.utils.time_utils import (
    UnknownTimeZoneError, format_time_in_time_zone, list_iana_time_zones,
    parse_instant, to_iso_in_time_zone, utc_offset_hours,
)
from scene_core.utils.geo_utils import format_offset


def setup_parser(subparsers):
    """Setup the timezones subcommand parser."""
    parser = subparsers.add_parser(
        'timezones',
        help='List time zones or show a zone\'s clock',
        description='List IANA time zones, or show the wall clock of one zone'
    )

    parser.add_argument(
        '--filter',
        help='Only list zones containing this text (case-insensitive)'
    )
    parser.add_argument(
        '--clock',
        metavar='ZONE',
        help='Show the wall clock in ZONE instead of listing'
    )
    parser.add_argument(
        '--time', '-t',
        default='now',
        help='ISO-8601 time for --clock (default: now)'
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
    """Execute the timezones command."""
    if args.clock:
        try:
            instant = parse_instant(args.time)
            offset = utc_offset_hours(instant, args.clock)
        except UnknownTimeZoneError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Error: Invalid time: {e}", file=sys.stderr)
            return 1
        result = {
            'zone': args.clock,
            'clock': format_time_in_time_zone(instant, args.clock),
            'local': to_iso_in_time_zone(instant, args.clock),
            'utc_offset_hours': offset,
        }
        if args.format == 'json':
            print(json.dumps(result, indent=2))
        else:
            print(f"{result['zone']}  {result['clock']}  "
                  f"({result['local']}, UTC{format_offset(offset)})")
        return 0

    zones = list_iana_time_zones()
    if args.filter:
        needle = args.filter.lower()
        zones = [z for z in zones if needle in z.lower()]

    if args.format == 'json':
        print(json.dumps(zones, indent=2))
    else:
        for zone in zones:
            print(zone)

    if not getattr(args, 'quiet', False):
        print(f"\nTime zones: {len(zones)}", file=sys.stderr)
    return 0
