"""Planets command - body table and orbital positions."""
import json
import os
import sys

from scene_core.export.base import ExportBatch
from scene_core.export.csv_exporter import CSVExporter
from scene_core.export.json_exporter import JSONExporter
from scene_core.export.records import planet_records
from scene_core.models.bodies import format_quantity
from scene_core.simulation.orbits import SimulationClock, SolarSystemModel, focus_tween


def setup_parser(subparsers):
    """Setup the planets subcommand parser."""
    parser = subparsers.add_parser(
        'planets',
        help='Planet table and positions',
        description='List the solar system bodies with their scene positions '
                    'after a number of simulated days'
    )

    parser.add_argument('-o', '--output', help='Output file (json or csv)')
    parser.add_argument(
        '--days', '-d',
        type=float,
        default=0.0,
        help='Simulated days since the start (default: 0)'
    )
    parser.add_argument(
        '--seconds',
        type=float,
        help='Instead of --days, play the clock for this many real seconds'
    )
    parser.add_argument(
        '--speed',
        type=float,
        default=1.0,
        help='Time scale for --seconds (1/16 to 256, default: 1)'
    )
    parser.add_argument(
        '--focus',
        help='Show where the camera ends up when focusing this body'
    )
    parser.add_argument(
        '-f', '--format',
        choices=['text', 'json', 'csv'],
        default='text',
        help='Output format (default: text)'
    )

    parser.set_defaults(func=run)
    return parser


def _simulated_days(args) -> float:
    if args.seconds is None:
        return args.days
    clock = SimulationClock(time_scale=args.speed)
    # The clock accepts at most one short frame per call
    frames = int(args.seconds / 0.05)
    for _ in range(frames):
        clock.advance(0.05)
    clock.advance(max(0.0, args.seconds - frames * 0.05))
    return clock.days


def run(args):
    """Execute the planets command."""
    model = SolarSystemModel()
    days = _simulated_days(args)
    records = planet_records(model, days)

    if args.focus:
        wanted = args.focus.lower()
        name = next((n for n in model.names() if n.lower() == wanted), args.focus)
        tween = focus_tween(model, name, (0.0, 80.0, 220.0), (0.0, 0.0, 0.0), days)
        if tween is None:
            print(f"Error: Unknown body: {args.focus}", file=sys.stderr)
            return 1
        pos = tween.to_pos
        print(f"Focus {args.focus}: camera ({pos[0]:.3f}, {pos[1]:.3f}, {pos[2]:.3f}) "
              f"looking at ({tween.to_target[0]:.3f}, {tween.to_target[1]:.3f}, "
              f"{tween.to_target[2]:.3f})")

    if args.output:
        fmt = args.format
        if fmt == 'text':
            ext = os.path.splitext(args.output)[1].lower()
            fmt = 'csv' if ext == '.csv' else 'json'
        exporter = CSVExporter() if fmt == 'csv' else JSONExporter()
        exporter.export(ExportBatch(records, source=f"planets day {days:g}"), args.output)
        if not getattr(args, 'quiet', False):
            print(f"Saved {len(records)} planets to: {args.output}")
        return 0

    if args.format == 'json':
        print(json.dumps([r.properties for r in records], indent=2))
    elif args.format == 'csv':
        import csv
        columns = ['name', 'radius_km', 'distance_km', 'period_days', 'angle_deg', 'x', 'y', 'z']
        writer = csv.DictWriter(sys.stdout, fieldnames=columns, extrasaction='ignore')
        writer.writeheader()
        for r in records:
            writer.writerow(r.properties)
    else:
        print(f"Day {days:.2f} ({days / 365.25 * 100 % 100:.1f}% of an Earth year)")
        print(f"{'name':<8} {'radius':>10} {'distance':>11} {'period':>9} {'angle':>8}")
        for r in records:
            p = r.properties
            print(f"{p['name']:<8} {format_quantity(p['radius_km']):>10} "
                  f"{p['distance']:>11} {p['period_days']:>9g} {p['angle_deg']:>7.1f}°")
    return 0
