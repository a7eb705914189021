"""CLI main entry point with subcommand structure."""
import argparse
import sys
from typing import Optional

from scene_core import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='threescape',
        description='threescape - sun, globe, cloud and orbit calculations for 3D scenes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  threescape sun --time 2024-06-21T12:00:00Z
  threescape sun --tz Asia/Shanghai --lat 31.2
  threescape terminator -o terminator.geojson
  threescape clouds clouds.png --low
  threescape noise 1.5 2.25 --octaves 6
  threescape latlon 31.23 121.47
  threescape timezones --clock Europe/Paris
  threescape tower --floor 66
  threescape planets --days 100 -f csv -o planets.csv
  threescape country 48.85 2.35 --boundaries countries.json --names countries.tsv
'''
    )

    # Global options
    parser.add_argument('--version', '-V', action='version',
                        version=f'threescape {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress non-error output')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase verbosity')

    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       description='Available commands')

    # Ephemeris
    from scene_core.cli.commands.sun import setup_parser as setup_sun
    setup_sun(subparsers)

    from scene_core.cli.commands.terminator import setup_parser as setup_terminator
    setup_terminator(subparsers)

    # Textures
    from scene_core.cli.commands.clouds import setup_parser as setup_clouds
    setup_clouds(subparsers)

    from scene_core.cli.commands.noise import setup_parser as setup_noise
    setup_noise(subparsers)

    # Geodesy and time
    from scene_core.cli.commands.latlon import setup_parser as setup_latlon
    setup_latlon(subparsers)

    from scene_core.cli.commands.timezones import setup_parser as setup_timezones
    setup_timezones(subparsers)

    from scene_core.cli.commands.country import setup_parser as setup_country
    setup_country(subparsers)

    # Scene data
    from scene_core.cli.commands.tower import setup_parser as setup_tower
    setup_tower(subparsers)

    from scene_core.cli.commands.planets import setup_parser as setup_planets
    setup_planets(subparsers)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # No command specified - show help
    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        if parsed_args.command == 'sun':
            from scene_core.cli.commands.sun import run as cmd_sun
            return cmd_sun(parsed_args)
        elif parsed_args.command == 'terminator':
            from scene_core.cli.commands.terminator import run as cmd_terminator
            return cmd_terminator(parsed_args)
        elif parsed_args.command == 'clouds':
            from scene_core.cli.commands.clouds import run as cmd_clouds
            return cmd_clouds(parsed_args)
        elif parsed_args.command == 'noise':
            from scene_core.cli.commands.noise import run as cmd_noise
            return cmd_noise(parsed_args)
        elif parsed_args.command == 'latlon':
            from scene_core.cli.commands.latlon import run as cmd_latlon
            return cmd_latlon(parsed_args)
        elif parsed_args.command == 'timezones':
            from scene_core.cli.commands.timezones import run as cmd_timezones
            return cmd_timezones(parsed_args)
        elif parsed_args.command == 'country':
            from scene_core.cli.commands.country import run as cmd_country
            return cmd_country(parsed_args)
        elif parsed_args.command == 'tower':
            from scene_core.cli.commands.tower import run as cmd_tower
            return cmd_tower(parsed_args)
        elif parsed_args.command == 'planets':
            from scene_core.cli.commands.planets import run as cmd_planets
            return cmd_planets(parsed_args)
        else:
            parser.print_help()
            return 1

    except FileNotFoundError as e:
        print(f"threescape: error: File not found: {e}", file=sys.stderr)
        return 3
    except PermissionError as e:
        print(f"threescape: error: Permission denied: {e}", file=sys.stderr)
        return 4
    except Exception as e:
        print(f"threescape: error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
