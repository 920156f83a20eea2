# src/scoreforge/__main__.py

import sys

from scoreforge.cli import main

if __name__ == "__main__":
    sys.exit(main())
