"""Allow ``python -m cwdswitch``."""

import sys

from cwdswitch.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
