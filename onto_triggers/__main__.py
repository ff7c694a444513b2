"""Entry point for ``python -m onto_triggers``."""

import sys

from .cli import main

sys.exit(main())
