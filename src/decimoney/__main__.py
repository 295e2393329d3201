"""Allow ``python -m decimoney``."""

import sys

from decimoney.cli import main

sys.exit(main())
