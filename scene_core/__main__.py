"""Allow running scene_core as a module.

Usage:
    python -m scene_core --help
    python -m scene_core sun --time now
    python -m scene_core clouds clouds.png
"""

import sys
from scene_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
