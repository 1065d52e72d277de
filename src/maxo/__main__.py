"""Allow ``python -m maxo``."""

from maxo.cli import main

raise SystemExit(main())
