"""Allow ``python -m fussyfood``."""

import sys

from fussyfood.cli import main

sys.exit(main())
