"""Command-line interface for threescape.

The console script `threescape` points at main() below:

    threescape --help
    threescape sun --time now
    threescape clouds clouds.png

`python -m scene_core.cli` runs the same entry point.
"""

import sys
from scene_core.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main() -> int:
    """Run the CLI with sys.argv and turn interrupts into exit code 130.

    Returns:
        Exit code from the command, 1 for unexpected failures
    """
    try:
        return _main() or 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"threescape: fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
