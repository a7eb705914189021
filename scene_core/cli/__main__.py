"""Allow running scene_core.cli as a module.

Usage:
    python -m scene_core.cli --help
    python -m scene_core.cli sun --time now
"""

import sys
from scene_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
