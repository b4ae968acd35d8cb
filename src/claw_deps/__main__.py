"""Allow ``python -m claw_deps``."""

import sys

from claw_deps.cli import main

sys.exit(main())
