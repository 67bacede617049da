"""Allow ``python -m linguimulti``."""

import sys

from linguimulti.cli import main

sys.exit(main())
