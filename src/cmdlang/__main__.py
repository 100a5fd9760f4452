"""Entry point for ``python -m cmdlang``."""

import sys

from cmdlang.cli import main

sys.exit(main())
