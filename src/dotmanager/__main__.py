"""Allow running as ``python -m dotmanager``."""

import sys

from .cli import main

sys.exit(main())
