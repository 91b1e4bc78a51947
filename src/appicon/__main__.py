"""Allow ``python -m appicon``."""

import sys

from appicon.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
