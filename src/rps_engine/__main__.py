"""Allow ``python -m rps_engine``."""

import sys

from .cli import main

sys.exit(main())
