"""Sun command - sun direction, subsolar point and local sun position."""
import json
import sys

from scene_core.ephemeris.sun import (
    declination, greenwich_mean_sidereal_time, julian_day, solar_position,
    subsolar_point, sun_direction_eci, sun_direction_scene, sun_light_state,
)
from scene_core.utils.time_utils import (
    UnknownTimeZoneError, parse_instant, resolve_time_zone, to_iso_in_time_zone,
    wall_clock_parts,
)


def setup_parser(subparsers):
    """Setup the sun subcommand parser."""
    parser = subparsers.add_parser(
        'sun',
        help='Compute the sun direction for an instant',
        description='Compute the sun direction vector, subsolar point and, '
                    'for a latitude, the local altitude/azimuth'
    )

    parser.add_argument(
        '--time', '-t',
        default='now',
        help='ISO-8601 time (default: now); naive times use --tz'
    )
    parser.add_argument(
        '--tz',
        default='UTC',
        help='IANA time zone for input and display (default: UTC)'
    )
    parser.add_argument(
        '--lat',
        type=float,
        help='Observer latitude for the local sun-study model'
    )
    parser.add_argument(
        '-f', '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )
    parser.add_argument(
        '--copy',
        action='store_true',
        help='Copy the subsolar point to clipboard (if pyperclip available)'
    )

    parser.set_defaults(func=run)
    return parser


def compute(args):
    """Collect the sun quantities for the parsed arguments."""
    resolve_time_zone(args.tz)
    instant = parse_instant(args.time, args.tz)
    sub_lat, sub_lon = subsolar_point(instant)
    result = {
        'time_utc': instant.isoformat(),
        'time_local': to_iso_in_time_zone(instant, args.tz),
        'time_zone': args.tz,
        'julian_day': round(julian_day(instant), 6),
        'gmst_deg': round(greenwich_mean_sidereal_time(instant), 6),
        'declination_deg': round(declination(instant), 6),
        'subsolar': {'lat': round(sub_lat, 6), 'lon': round(sub_lon, 6)},
        'direction_eci': [round(c, 9) for c in sun_direction_eci(instant)],
        'direction_scene': [round(c, 9) for c in sun_direction_scene(instant)],
    }

    if args.lat is not None:
        p = wall_clock_parts(instant, args.tz)
        hour = p['hour'] + p['minute'] / 60 + p['second'] / 3600
        position = solar_position(hour, p['month'], p['day'], args.lat)
        light = sun_light_state(position.altitude)
        result['local'] = {
            'latitude': args.lat,
            'hour': round(hour, 4),
            'altitude_deg': round(position.altitude, 4),
            'azimuth_deg': round(position.azimuth, 4),
            'light_intensity': round(light.intensity, 4),
            'ambient_intensity': light.ambient,
            'light_color': f"#{light.color:06x}",
        }
    return result


def format_text(result) -> str:
    """Render the result as aligned text lines."""
    lines = [
        f"Time (UTC):      {result['time_utc']}",
        f"Time ({result['time_zone']}): {result['time_local']}",
        f"Julian day:      {result['julian_day']:.6f}",
        f"GMST:            {result['gmst_deg']:.4f}°",
        f"Declination:     {result['declination_deg']:.4f}°",
        f"Subsolar point:  {result['subsolar']['lat']:.4f}, {result['subsolar']['lon']:.4f}",
        "Direction (ECI): ({:.6f}, {:.6f}, {:.6f})".format(*result['direction_eci']),
        "Direction (globe): ({:.6f}, {:.6f}, {:.6f})".format(*result['direction_scene']),
    ]
    local = result.get('local')
    if local:
        lines.extend([
            "",
            f"Local sun at latitude {local['latitude']} (hour {local['hour']:.2f}):",
            f"  Altitude:  {local['altitude_deg']:.2f}°",
            f"  Azimuth:   {local['azimuth_deg']:.2f}°",
            f"  Light:     {local['light_intensity']:.2f} ({local['light_color']}), "
            f"ambient {local['ambient_intensity']}",
        ])
    return "\n".join(lines)


def run(args):
    """Execute the sun command."""
    try:
        result = compute(args)
    except UnknownTimeZoneError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid time: {e}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(json.dumps(result, indent=2))
    else:
        print(format_text(result))

    if args.copy:
        try:
            import pyperclip
            clip_text = f"{result['subsolar']['lat']},{result['subsolar']['lon']}"
            pyperclip.copy(clip_text)
            print(f"\nCopied to clipboard: {clip_text}")
        except ImportError:
            print("\nNote: Install pyperclip for clipboard support", file=sys.stderr)

    return 0
