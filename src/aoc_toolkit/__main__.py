"""Allow ``python -m aoc_toolkit``."""

from aoc_toolkit.cli import main

raise SystemExit(main())
