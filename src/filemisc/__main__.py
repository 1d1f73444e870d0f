"""Allow ``python -m filemisc``."""

import sys

from filemisc.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
