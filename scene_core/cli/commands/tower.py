"""Tower command - floor information and layer layout."""
import json
import sys

from scene_core.models.floors import FLOORS, floor_title, get_floor
from scene_core.models.tower import TowerLayout, TowerParams
from scene_core.simulation.scroll import ScrollController
from scene_core.utils.math_utils import color_to_css


def setup_parser(subparsers):
    """Setup the tower subcommand parser."""
    parser = subparsers.add_parser(
        'tower',
        help='Tower floors and layout',
        description='Show floor information, the floor at a height, the '
                    'per-layer layout, or simulate scrolling to a floor'
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--floor', type=int, help='Show information for a floor (1-based)')
    mode.add_argument('--height', type=float, help='Find the floor at a scene height')
    mode.add_argument('--layers', action='store_true', help='List every layer transform')
    mode.add_argument('--jump', type=int, metavar='FLOOR',
                      help='Simulate scrolling the camera to a floor')

    parser.add_argument(
        '--frames',
        type=int,
        default=120,
        help='Frames to simulate for --jump (default: 120)'
    )
    parser.add_argument(
        '--layer-count',
        type=int,
        default=128,
        help='Number of floors (default: 128)'
    )
    parser.add_argument(
        '-f', '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )

    parser.set_defaults(func=run)
    return parser


def _floor_result(layout, number):
    info = get_floor(number, layout.params.layer_count)
    result = info.to_dict()
    result['floor'] = number
    result['title'] = floor_title(number, info)
    result['height_m'] = layout.height_meters(number)
    result['scene_y'] = layout.floor_y(number)
    return result


def run(args):
    """Execute the tower command."""
    try:
        layout = TowerLayout(TowerParams(layer_count=args.layer_count))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.floor is not None:
        try:
            result = _floor_result(layout, args.floor)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        if args.format == 'json':
            print(json.dumps(result, indent=2))
        else:
            print(result['title'])
            print(f"Type:        {result['type']}")
            print(f"Height:      {result['height_m']} m")
            print(f"Description: {result['description']}")
        return 0

    if args.height is not None:
        floor = layout.floor_index_from_y(args.height)
        result = _floor_result(layout, floor)
        if args.format == 'json':
            print(json.dumps(result, indent=2))
        else:
            print(f"Height {args.height} -> {result['title']}")
        return 0

    if args.layers:
        rows = [{
            'index': t.index,
            'y': round(t.y, 4),
            'twist': round(t.twist, 6),
            'radius_x': round(t.radius_x, 4),
            'radius_z': round(t.radius_z, 4),
            'color': color_to_css(t.color),
        } for t in layout.layers()]
        if args.format == 'json':
            print(json.dumps(rows, indent=2))
        else:
            print(f"{'index':>5} {'y':>9} {'twist':>9} {'rx':>8} {'rz':>8}  color")
            for r in rows:
                print(f"{r['index']:>5} {r['y']:>9.2f} {r['twist']:>9.4f} "
                      f"{r['radius_x']:>8.2f} {r['radius_z']:>8.2f}  {r['color']}")
        return 0

    if args.jump is not None:
        controller = ScrollController(layout)
        controller.jump_to_floor(args.jump)
        frame = None
        for _ in range(max(1, args.frames)):
            frame = controller.update()
        result = {
            'target': controller.target,
            'progress': round(frame.progress, 6),
            'camera_y': round(frame.camera_y, 4),
            'look_at_y': round(frame.look_at_y, 4),
            'floor': frame.floor,
        }
        if args.format == 'json':
            print(json.dumps(result, indent=2))
        else:
            print(f"After {args.frames} frames: progress {result['progress']:.3f}, "
                  f"camera y {result['camera_y']:.1f}, floor {result['floor']}F")
        return 0

    params = layout.params
    summary = {
        'layer_count': params.layer_count,
        'floor_height': params.floor_height,
        'total_height': params.total_height,
        'described_floors': sorted(n for n in FLOORS if n <= params.layer_count),
    }
    if args.format == 'json':
        print(json.dumps(summary, indent=2))
    else:
        print(f"Floors:       {summary['layer_count']}")
        print(f"Floor height: {summary['floor_height']}")
        print(f"Total height: {summary['total_height']:.1f}")
        print(f"Described:    {', '.join(str(n) for n in summary['described_floors'])}")
    return 0
