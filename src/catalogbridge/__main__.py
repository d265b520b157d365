"""Allow ``python -m catalogbridge``."""

import sys

from catalogbridge.cli import main

sys.exit(main())
