"""Allow ``python -m histconsole``."""

import sys

from histconsole.cli import main

sys.exit(main())
