"""Allow ``python -m themesmith``."""

import sys

from .cli import main

sys.exit(main())
