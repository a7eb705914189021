"""Clouds command - write the FBM cloud texture and preview layer state."""
import json
import sys
import time

from scene_core.textures.clouds import (
    CloudQuality, CloudSystem, HIGH_QUALITY, LOW_QUALITY, make_cloud_texture,
)


def setup_parser(subparsers):
    """Setup the clouds subcommand parser."""
    parser = subparsers.add_parser(
        'clouds',
        help='Generate the cloud texture PNG',
        description='Render the white FBM cloud texture used by the cloud '
                    'layers and optionally show layer opacity for a camera height'
    )

    parser.add_argument('output', help='Output PNG file')
    parser.add_argument(
        '--low',
        action='store_true',
        help='Low quality preset (256 px, 4 octaves, fewer layers)'
    )
    parser.add_argument(
        '--size',
        type=int,
        help='Texture size in pixels (overrides the preset)'
    )
    parser.add_argument(
        '--octaves',
        type=int,
        help='FBM octaves (overrides the preset)'
    )
    parser.add_argument(
        '--camera-y',
        type=float,
        help='Print each layer\'s state for a camera at this height'
    )
    parser.add_argument(
        '--layers',
        type=int,
        default=5,
        help='Requested layer count for --camera-y (default: 5)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Random seed for layer placement'
    )

    parser.set_defaults(func=run)
    return parser


def resolve_quality(args) -> CloudQuality:
    """Preset from --low, with --size/--octaves overrides."""
    preset = LOW_QUALITY if args.low else HIGH_QUALITY
    return CloudQuality(
        texture_size=args.size if args.size is not None else preset.texture_size,
        octaves=args.octaves if args.octaves is not None else preset.octaves,
        reduced=preset.reduced,
    )


def run(args):
    """Execute the clouds command."""
    quality = resolve_quality(args)
    if quality.texture_size < 1 or quality.octaves < 1:
        print("Error: --size and --octaves must be positive", file=sys.stderr)
        return 1

    quiet = getattr(args, 'quiet', False)
    start_time = time.time()
    image = make_cloud_texture(quality)
    image.save(args.output)
    elapsed = time.time() - start_time

    if not quiet:
        print(f"Saved {quality.texture_size}x{quality.texture_size} cloud texture "
              f"({quality.octaves} octaves) to: {args.output}")
        print(f"Time: {elapsed:.3f}s", file=sys.stderr)

    if args.camera_y is not None:
        system = CloudSystem(count=args.layers, quality=quality, seed=args.seed)
        frames = system.update(0.0, args.camera_y)
        print(json.dumps([{
            'height': round(f.height, 3),
            'opacity': round(f.opacity, 4),
            'scale': round(f.scale, 4),
            'offset_u': round(f.offset_u, 4),
            'offset_v': round(f.offset_v, 4),
            'repeat': round(f.repeat, 4),
        } for f in frames], indent=2))

    return 0
