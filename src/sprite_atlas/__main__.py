"""Allow running the command line tool with ``python -m sprite_atlas``."""

import sys

from sprite_atlas.app.cli import main

sys.exit(main())
