"""Allow ``python -m dama``."""

import sys

from dama.app import main

sys.exit(main())
