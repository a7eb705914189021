"""Noise command - sample value noise or FBM at a point."""
import json
import sys

from scene_core.textures.noise import fbm_2d, hash2d, value_noise_2d


def setup_parser(subparsers):
    """Setup the noise subcommand parser."""
    parser = subparsers.add_parser(
        'noise',
        help='Sample value noise / FBM',
        description='Sample hash, value noise and FBM at a 2D point'
    )

    parser.add_argument('x', type=float, help='X coordinate')
    parser.add_argument('y', type=float, help='Y coordinate')
    parser.add_argument(
        '--octaves',
        type=int,
        default=5,
        help='FBM octaves (default: 5)'
    )
    parser.add_argument(
        '--lacunarity',
        type=float,
        default=2.0,
        help='Frequency multiplier per octave (default: 2.0)'
    )
    parser.add_argument(
        '--gain',
        type=float,
        default=0.5,
        help='Amplitude multiplier per octave (default: 0.5)'
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
    """Execute the noise command."""
    try:
        fbm = fbm_2d(args.x, args.y, args.octaves, args.lacunarity, args.gain)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = {
        'x': args.x,
        'y': args.y,
        'hash': hash2d(args.x, args.y),
        'value': value_noise_2d(args.x, args.y),
        'fbm': fbm,
        'octaves': args.octaves,
    }

    if args.format == 'json':
        print(json.dumps(result, indent=2))
    else:
        print(f"hash({args.x}, {args.y})  = {result['hash']:.6f}")
        print(f"value({args.x}, {args.y}) = {result['value']:.6f}")
        print(f"fbm({args.x}, {args.y})   = {result['fbm']:.6f}  ({args.octaves} octaves)")
    return 0
