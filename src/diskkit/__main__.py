"""Allow running diskkit as ``python -m diskkit``."""

import sys

from diskkit.cli.main import main

sys.exit(main())
